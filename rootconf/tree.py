# rootconf/tree.py
"""
rootconf.tree
-------------

Builds the flat configuration mapping from a directory of source files.

Every recognised file under the config directory becomes one top-level key:
its relative path with the extension stripped and directory separators
replaced by dots (``services/mail/smtp.toml`` -> ``services.mail.smtp``).
Entries are visited in sorted order within each directory; when two files
normalize to the same key the one visited later wins.
"""

import os
import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional

import tomli

from .exceptions import ConfigFileError
from .provenance import SourceRegistry
from .utils import PathLike

log = logging.getLogger(__name__)

Evaluator = Callable[[Path], Any]


def _load_toml(path: Path) -> Any:
    with open(path, mode='rb') as f:
        return tomli.load(f)


def _load_json(path: Path) -> Any:
    with open(path, mode='r', encoding='utf-8') as f:
        return json.load(f)


# Suffix -> evaluator, in precedence order for extension-less lookups.
DEFAULT_EVALUATORS: Dict[str, Evaluator] = {
    '.toml': _load_toml,
    '.json': _load_json,
}


def load_source_file(path: PathLike, evaluators: Optional[Mapping[str, Evaluator]] = None) -> Any:
    """
    Evaluate a single configuration source file and return its value.

    The value may be of any type (a JSON file may hold a list or a scalar).

    Raises:
        ConfigFileError: unsupported suffix, or the evaluator failed.
    """
    evaluators = DEFAULT_EVALUATORS if evaluators is None else evaluators
    path = Path(path)
    evaluator = evaluators.get(path.suffix.lower())
    if evaluator is None:
        raise ConfigFileError(path, f"Unsupported config file type: {path.suffix}")
    try:
        return evaluator(path)
    except Exception as e:
        raise ConfigFileError(path, e) from e


def find_source_file(base_dir: PathLike, name: str,
                     evaluators: Optional[Mapping[str, Evaluator]] = None) -> Optional[Path]:
    """
    Locate `name` under `base_dir`.

    A name with a recognised suffix is looked up as is. Otherwise each
    recognised suffix is tried in precedence order.
    """
    evaluators = DEFAULT_EVALUATORS if evaluators is None else evaluators
    base_dir = Path(base_dir)
    candidate = base_dir / name
    if candidate.suffix.lower() in evaluators:
        return candidate if candidate.is_file() else None
    for suffix in evaluators:
        candidate = base_dir / f"{name}{suffix}"
        if candidate.is_file():
            return candidate
    return None


def key_for(path: Path, base_dir: Path) -> str:
    """Dot-joined key for `path` relative to `base_dir`, extension stripped."""
    relative = path.relative_to(base_dir)
    parts = list(relative.parts)
    parts[-1] = relative.stem
    return '.'.join(parts)


def build_tree(config_dir: PathLike,
               evaluators: Optional[Mapping[str, Evaluator]] = None,
               registry: Optional[SourceRegistry] = None) -> Dict[str, Any]:
    """
    Recursively load every recognised source file under `config_dir`.

    Args:
        config_dir: Directory to walk. A missing directory yields ``{}``.
        evaluators: Suffix -> evaluator table (defaults to TOML and JSON).
        registry: Optional SourceRegistry that records where each key came from.

    Returns:
        Flat mapping of dot-joined relative path -> evaluated value.
    """
    evaluators = DEFAULT_EVALUATORS if evaluators is None else evaluators
    config_dir = Path(config_dir)
    config: Dict[str, Any] = {}

    if not config_dir.is_dir():
        log.debug(f"DEBUG [rootconf.build_tree]: No config directory at {config_dir}.")
        return config

    _walk(config_dir, config_dir, evaluators, registry, config)
    log.debug(f"DEBUG [rootconf.build_tree]: Loaded {len(config)} keys from {config_dir}.")
    return config


def _walk(directory: Path, base_dir: Path, evaluators, registry, config: Dict[str, Any]):
    for name in sorted(os.listdir(directory)):
        path = directory / name

        if path.is_dir():
            _walk(path, base_dir, evaluators, registry, config)
            continue

        if path.suffix.lower() not in evaluators:
            continue

        key = key_for(path, base_dir)
        if key in config:
            log.warning(f"Warning: Config key '{key}' loaded again from {path}; the earlier value is replaced.")
        config[key] = load_source_file(path, evaluators)
        if registry is not None:
            registry.record(key, f"config:{path}")
