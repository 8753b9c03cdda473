# rootconf/helpers.py
"""
rootconf.helpers
----------------

Free-function shortcuts: `config()` for configuration values and `env()`
for environment variables with literal-string coercion.
"""

import os
import re
from typing import Any, Optional

from . import store

# Literal strings env() converts, compared case-insensitively.
_LITERALS = {
    'true': True, '(true)': True,
    'false': False, '(false)': False,
    'null': None, '(null)': None,
    'empty': '', '(empty)': '',
}

_NUMERIC_RE = re.compile(r'^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$')
_INTEGER_RE = re.compile(r'^-?\d+$')


def config(key: Optional[str] = None, default: Any = None) -> Any:
    """
    Get a configuration value using dot notation.

    With no key, returns the default `ConfigStore` itself.
    """
    config_store = store.get_store()
    if key is None:
        return config_store
    return config_store.get(key, default)


def coerce_env_value(raw_value: Any, convert_numeric: bool = False) -> Any:
    """
    Convert a raw environment string.

    ``true``/``(true)`` -> True, ``false``/``(false)`` -> False,
    ``null``/``(null)`` -> None, ``empty``/``(empty)`` -> ``""``
    (all case-insensitive). With `convert_numeric`, integer strings become
    int and other numeric strings (``"3.14"``, ``"1.5e3"``) float. Anything
    else is returned unchanged.
    """
    if not isinstance(raw_value, str):
        return raw_value

    lower_val = raw_value.lower()
    if lower_val in _LITERALS:
        return _LITERALS[lower_val]

    if convert_numeric and _NUMERIC_RE.match(raw_value):
        if _INTEGER_RE.match(raw_value):
            return int(raw_value)
        return float(raw_value)

    return raw_value


def env(name: str, default: Any = None, convert_numeric: bool = False) -> Any:
    """
    Get an environment variable, coerced with `coerce_env_value`.

    The default store is initialised first so the project's .env file is
    loaded. Variables it applied are read from its mirror before falling
    back to ``os.environ``.
    """
    mirror = store.get_store().environ
    if name in mirror:
        raw_value = mirror[name]
    elif name in os.environ:
        raw_value = os.environ[name]
    else:
        return default
    return coerce_env_value(raw_value, convert_numeric)
