# rootconf/cli.py

import os
import json
import click
import toml

from .exceptions import ConfigError
from .helpers import coerce_env_value
from .store import ConfigStore, DEFAULT_CONFIG_DIR
from .envloader import DEFAULT_ENV_FILE


def _to_jsonable(value):
    """Best-effort conversion for values TOML may produce (dates, times)."""
    return json.loads(json.dumps(value, default=str))


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-r", "--root",      "root_path", help="Project root (skips discovery)")
@click.option("--config-dir",      default=DEFAULT_CONFIG_DIR, show_default=True,
              help="Config directory, relative to the root")
@click.option("--env-file",        default=DEFAULT_ENV_FILE, show_default=True,
              help=".env file, relative to the root")
@click.option("--strict-env",      is_flag=True, help="Fail if the .env file is missing")
@click.option("--eager",           is_flag=True, help="Load the config directory immediately")
@click.pass_context
def cli(ctx, root_path, config_dir, env_file, strict_env, eager):
    """
    rootconf CLI: inspect a project's configuration via dot-notation.

    Locates the project root (or uses `-r ROOT`), loads its .env file and
    config directory, then runs a subcommand:
      • get       KEY [--default JSON]
      • has       KEY
      • dump      [--to json|toml]
      • root
      • env       NAME [--numeric]
      • sources
    """
    try:
        store = ConfigStore(
            root_path=root_path,
            config_dir=config_dir,
            env_file=env_file,
            strict_env=strict_env,
            strict_root=True,
            lazy=not eager,
        )
    except ConfigError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        ctx.exit(1)

    ctx.obj = {"store": store}


def _load_error(ctx, e):
    click.secho(f"Error: {e}", fg="red", err=True)
    ctx.exit(1)


@cli.command()
@click.argument("key")
@click.option("--default", "default_json", help="JSON value printed if KEY is missing")
@click.pass_context
def get(ctx, key, default_json):
    """Print the value of KEY (dot-notation) as JSON."""
    store = ctx.obj["store"]
    try:
        if not store.has(key):
            if default_json is None:
                click.secho(f"Key not found: {key}", fg="yellow", err=True)
                ctx.exit(1)
            try:
                val = json.loads(default_json)
            except json.JSONDecodeError:
                val = default_json
        else:
            val = store.get(key)
    except ConfigError as e:
        _load_error(ctx, e)
    click.echo(json.dumps(_to_jsonable(val), indent=2))


@cli.command()
@click.argument("key")
@click.pass_context
def has(ctx, key):
    """Exit 0 if KEY exists in config, 1 otherwise."""
    try:
        found = ctx.obj["store"].has(key)
    except ConfigError as e:
        _load_error(ctx, e)
    click.echo("true" if found else "false")
    ctx.exit(0 if found else 1)


@cli.command()
@click.option("--to", "fmt", type=click.Choice(["json", "toml"]), default="json",
              help="Output format")
@click.pass_context
def dump(ctx, fmt):
    """Pretty-print the entire flat configuration mapping."""
    try:
        data = ctx.obj["store"].all()
    except ConfigError as e:
        _load_error(ctx, e)
    if fmt == "toml":
        click.echo(toml.dumps(data))
    else:
        click.echo(json.dumps(_to_jsonable(data), indent=2))


@cli.command()
@click.pass_context
def root(ctx):
    """Print the project root directory."""
    click.echo(str(ctx.obj["store"].get_root_path()))


@cli.command()
@click.argument("name")
@click.option("--numeric", is_flag=True, help="Convert numeric strings to int/float")
@click.pass_context
def env(ctx, name, numeric):
    """Print environment variable NAME (after .env loading) as JSON."""
    raw = ctx.obj["store"].environ.get(name, os.environ.get(name))
    if raw is None:
        click.secho(f"Variable not set: {name}", fg="yellow", err=True)
        ctx.exit(1)
    click.echo(json.dumps(coerce_env_value(raw, numeric)))


@cli.command()
@click.pass_context
def sources(ctx):
    """List the file each top-level key was loaded from."""
    store = ctx.obj["store"]
    try:
        store.all()
    except ConfigError as e:
        _load_error(ctx, e)
    entries = store.sources.all_entries()
    if not entries:
        click.echo("No configuration files loaded")
        return
    for key in sorted(entries):
        click.echo(f"{key}\t{entries[key].source}")
