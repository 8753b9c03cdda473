# rootconf/store.py
"""
rootconf.store
--------------

The configuration store: owns the flat mapping and orchestrates root
discovery, .env loading and the config directory walk.

Construction sequence:
    1.  Root discovery (`locate_root`), unless `root_path` is given.
    2.  `.env` loading from the root (`load_env`).
    3.  The config directory walk (`build_tree`), immediately with
        ``lazy=False`` or on the first read with the default ``lazy=True``.
        The choice only affects when the files are read, never the values
        that are returned.

A process-wide default store is available through `get_store()`; `reset()`
drops it so the next access rebuilds it from scratch. Stores are not
thread-safe, and a source file evaluated while the tree is being built must
not call back into the same store.
"""

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from .envloader import DEFAULT_ENV_FILE, load_env
from .exceptions import ConfigError, ConfigKeyNotFoundError, RootNotFoundError
from .locator import DEFAULT_MARKERS, MAX_SEARCH_DEPTH, locate_root
from .provenance import SourceEntry, SourceRegistry
from .resolver import (
    create_path as create_nested_path,
    find_owner,
    get_value,
    has_value,
    is_mapping,
    set_value,
    traverse,
    unwrap_for_key,
)
from .tree import DEFAULT_EVALUATORS, build_tree, find_source_file, load_source_file
from .utils import MODULE_DIR, PathLike, resolve_path

log = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = "config"

_MISSING = object()


class ConfigStore:
    """
    Dot-notation access to a project's configuration directory.

    ``get("services.mail.smtp.host")`` reads member ``host`` of the file
    ``<root>/config/services/mail/smtp.toml``. See `rootconf.resolver` for
    how dotted keys are split between file key and nested members.
    """

    def __init__(self,
                 root_path: Optional[PathLike] = None, # Skip discovery and use this root
                 start_dir: Optional[PathLike] = None, # Where discovery starts (default: package dir)
                 markers: Iterable[str] = DEFAULT_MARKERS,
                 max_depth: int = MAX_SEARCH_DEPTH,
                 config_dir: str = DEFAULT_CONFIG_DIR, # Relative to the root
                 env_file: str = DEFAULT_ENV_FILE, # Relative to the root
                 lazy: bool = True,
                 strict_root: bool = False, # Raise RootNotFoundError instead of running rootless
                 strict_env: bool = False, # Raise EnvFileNotFoundError on a missing .env
                 evaluators=None): # Suffix -> callable(path) table for source files
        self._config: Dict[str, Any] = {}
        self._config_loaded = False
        self._loading = False
        self._config_dir_name = config_dir
        self._evaluators = DEFAULT_EVALUATORS if evaluators is None else evaluators
        self.sources = SourceRegistry()
        self.environ: Dict[str, str] = {}

        if root_path is not None:
            self._root_path: Optional[Path] = resolve_path(root_path)
        else:
            self._root_path = locate_root(start_dir, markers, max_depth)

        if self._root_path is None:
            if strict_root:
                raise RootNotFoundError(start_dir or MODULE_DIR, max_depth)
            log.warning("Warning: Project root not found; configuration will be empty.")
            return

        log.debug(f"DEBUG [rootconf.ConfigStore]: Using project root {self._root_path}")
        self.environ = load_env(self._root_path, env_file, strict=strict_env)

        if not lazy:
            self._ensure_config_loaded()

    def _ensure_config_loaded(self):
        """Walk the config directory once, on first use."""
        if self._config_loaded or self._root_path is None:
            return
        if self._loading:
            raise ConfigError("Configuration is still loading; source files must not read it back.")

        self._loading = True
        try:
            sources = SourceRegistry()
            loaded = build_tree(self.config_dir, self._evaluators, sources)
        finally:
            self._loading = False

        self._config.update(loaded)
        self.sources.merge(sources)
        self._config_loaded = True

    @property
    def config_dir(self) -> Optional[Path]:
        if self._root_path is None:
            return None
        return self._root_path / self._config_dir_name

    def get_root_path(self) -> Optional[Path]:
        return self._root_path

    # --- Dot-notation access ---

    def get(self, key: str, default: Any = None) -> Any:
        """
        Retrieve a value by dot-notation key, returning `default` if not found.

        e.g. ``get('database')`` returns the whole database file,
             ``get('database.connections.mysql.host')`` a nested value,
             ``get('hello.test')`` the file ``config/hello/test.toml``.

        Mappings and lists are returned as copies; change values with `set`.
        """
        self._ensure_config_loaded()
        value = get_value(self._config, key, _MISSING)
        if value is _MISSING:
            return default
        return copy.deepcopy(value)

    def has(self, key: str) -> bool:
        """Check whether a key resolves to a value (a stored None counts)."""
        self._ensure_config_loaded()
        return has_value(self._config, key)

    def __contains__(self, key: Any) -> bool:
        if not isinstance(key, str):
            return False
        return self.has(key)

    def set(self, key: str, value: Any) -> bool:
        """
        Overwrite an existing key at runtime. Changes are never written back
        to the source files.

        Returns:
            True if the key existed and was set, False otherwise (nothing is
            created).
        """
        self._ensure_config_loaded()
        return set_value(self._config, key, value)

    def set_or_fail(self, key: str, value: Any):
        """Like `set`, but raises ConfigKeyNotFoundError instead of returning False."""
        if not self.set(key, value):
            raise ConfigKeyNotFoundError(key)

    def all(self) -> Dict[str, Any]:
        """Return a deep copy of the whole flat mapping."""
        self._ensure_config_loaded()
        return copy.deepcopy(self._config)

    def source_of(self, key: str) -> Optional[SourceEntry]:
        """Where the top-level entry owning `key` was loaded from, if anywhere."""
        self._ensure_config_loaded()
        owner = find_owner(self._config, key)
        if owner is None:
            return None
        return self.sources.get(owner[0])

    # --- Files at the project root ---

    def _storage_key(self, filename: str) -> str:
        name = Path(filename)
        if name.suffix.lower() in self._evaluators:
            name = name.with_suffix('')
        return name.name

    def load_from_root(self, filename: str, key: Optional[str] = None, default: Any = None) -> Any:
        """
        Load a configuration file from the project root directory.

        The file is stored under its bare name (``"settings.toml"`` and
        ``"settings"`` both become ``settings``) and only read once.

        Args:
            filename: File name, with or without a recognised extension.
            key: Optional key to look up inside the file (supports dot
                 notation). The looked-up section is also stored as a
                 top-level entry under the key's first segment; a file
                 whose only member is that segment is stored unwrapped.
            default: Returned if the file does not exist, is not a mapping,
                     or `key` is not found in it.

        Raises:
            RootNotFoundError: no project root was found.
            ConfigFileError: the file exists but could not be evaluated.
        """
        if self._root_path is None:
            raise RootNotFoundError()
        self._ensure_config_loaded()

        config_key = self._storage_key(filename)

        if config_key not in self._config:
            path = find_source_file(self._root_path, filename, self._evaluators)
            if path is None:
                return default

            loaded = load_source_file(path, self._evaluators)
            if not is_mapping(loaded):
                return default

            self._config[config_key] = loaded
            self.sources.record(config_key, f"root:{path}")
            log.debug(f"DEBUG [rootconf.load_from_root]: Loaded '{config_key}' from {path}")

        file_config = self._config[config_key]

        if not is_mapping(file_config):
            return default

        if key is None:
            return copy.deepcopy(file_config)

        if '.' in key:
            segments = key.split('.')
            base_key = segments[0]
            self._config[base_key] = copy.deepcopy(unwrap_for_key(file_config, base_key))
            value = traverse(file_config, segments, _MISSING)
            return default if value is _MISSING else copy.deepcopy(value)

        if key in file_config:
            self._config[key] = copy.deepcopy(file_config[key])
            return copy.deepcopy(file_config[key])

        self._config[key] = copy.deepcopy(file_config)
        return default

    def set_from_root(self, filename: str, key: str, value: Any, create_path: bool = True) -> bool:
        """
        Set a value inside a root configuration file's entry at runtime.

        The file is loaded first if needed. Existing keys are overwritten via
        `set`; missing ones are created when `create_path` is True (the
        default), replacing any non-mapping member on the way with a dict.

        Returns:
            True if the value was set, False otherwise.
        """
        if self._root_path is None:
            return False

        config_key = self._storage_key(filename)

        if config_key not in self._config:
            self.load_from_root(filename)

        if config_key not in self._config:
            return False

        full_key = f"{config_key}.{key}"
        if self.has(full_key):
            return self.set(full_key, value)

        if not create_path:
            return False

        create_nested_path(self._config, config_key, key.split('.'), value)
        return True


# --- Default instance ---

_default_store: Optional[ConfigStore] = None
_default_options: Dict[str, Any] = {}


def get_store() -> ConfigStore:
    """Return the process-wide default store, creating it on first access."""
    global _default_store
    if _default_store is None:
        _default_store = ConfigStore(**_default_options)
    return _default_store


def configure(**options):
    """
    Set the keyword arguments used to build the default store and drop the
    current one. Accepts the same options as `ConfigStore`.
    """
    global _default_options
    _default_options = dict(options)
    reset()


def reset():
    """Drop the default store; the next access rebuilds it from scratch."""
    global _default_store
    _default_store = None
