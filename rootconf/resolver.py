# rootconf/resolver.py
"""
rootconf.resolver
-----------------

Dot-notation key resolution over a flat configuration mapping.

The mapping's own keys may contain dots (directory nesting is encoded as
dots), and a dotted key may also continue *into* the value stored at such a
key. Resolution therefore works in two steps:

1.  An exact top-level match always wins.
2.  Otherwise the key is split into segments and progressively shorter
    prefixes are tried as top-level keys, longest first. The FIRST prefix
    present in the mapping owns the key; the remaining segments are
    traversed inside its value. There is no backtracking to shorter
    prefixes, even when traversal into the owner fails.

With top-level keys ``"a.b"`` (``{"x": 1}``) and ``"a"``
(``{"b": {"c": 2}}``), ``get_value(config, "a.b.c")`` returns the default:
``"a.b"`` owns the key and has no member ``"c"``.

Traversal only descends through mappings. Lists, scalars and None are
leaves; a dot segment never indexes into a list.
"""

from collections.abc import Mapping, MutableMapping
from typing import Any, Dict, List, Optional, Tuple, Union

from .exceptions import ConfigError

# Values produced by evaluated source files.
ConfigValue = Union[None, bool, int, float, str, List['ConfigValue'], Dict[str, 'ConfigValue']]

_MISSING = object()


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def find_owner(config: Mapping, key: str) -> Optional[Tuple[str, List[str]]]:
    """
    Find the top-level key owning a dotted `key`.

    Returns:
        ``(file_key, remaining_segments)`` for the longest prefix of `key`
        present in `config`, or None if no prefix is present.
    """
    segments = key.split('.')
    for i in range(len(segments), 0, -1):
        file_key = '.'.join(segments[:i])
        if file_key in config:
            return file_key, segments[i:]
    return None


def traverse(value: Any, segments: List[str], default: Any = None) -> Any:
    """Descend through nested mappings by exact segment match."""
    for segment in segments:
        if not is_mapping(value) or segment not in value:
            return default
        value = value[segment]
    return value


def get_value(config: Mapping, key: str, default: Any = None) -> Any:
    """
    Retrieve `key` from the flat mapping, returning `default` if not found.
    """
    if key in config:
        return config[key]

    if '.' not in key:
        return default

    owner = find_owner(config, key)
    if owner is None:
        return default

    file_key, remaining = owner
    return traverse(config[file_key], remaining, default)


def has_value(config: Mapping, key: str) -> bool:
    """
    True if `key` resolves to a value. A stored None counts as present.
    """
    return get_value(config, key, _MISSING) is not _MISSING


def set_value(config: MutableMapping, key: str, value: Any) -> bool:
    """
    Overwrite an existing `key`.

    Never creates new top-level keys or new nested paths: returns False and
    leaves `config` untouched when `key` does not already resolve.
    """
    if not has_value(config, key):
        return False

    if '.' not in key:
        config[key] = value
        return True

    file_key, remaining = find_owner(config, key)
    if not remaining:
        config[file_key] = value
        return True

    write_nested(config, file_key, remaining, value)
    return True


def write_nested(config: MutableMapping, file_key: str, segments: List[str], value: Any):
    """
    Write `value` at `segments` inside ``config[file_key]``.

    Intermediate members that are missing or not mappings are replaced by
    empty dicts. The value at `file_key` itself must be a mutable mapping.

    Raises:
        ConfigError: a parent on the path is not a mutable mapping.
    """
    current = config[file_key]
    for segment in segments[:-1]:
        if not isinstance(current, MutableMapping):
            raise ConfigError(f"Cannot set '{file_key}.{'.'.join(segments)}': a parent key is not a mapping.")
        child = current.get(segment)
        if not isinstance(child, MutableMapping):
            child = current[segment] = {}
        current = child

    if not isinstance(current, MutableMapping):
        raise ConfigError(f"Cannot set '{file_key}.{'.'.join(segments)}': a parent key is not a mapping.")
    current[segments[-1]] = value


def create_path(config: MutableMapping, file_key: str, segments: List[str], value: Any):
    """
    Write `value` at `segments` below ``config[file_key]``, creating whatever
    is missing.

    Unlike `write_nested`, nothing on the path has to exist beforehand: an
    absent or non-mapping entry at `file_key` and absent or non-mapping
    members along the way are all replaced by empty dicts.
    """
    container, slot = config, file_key
    for segment in segments[:-1]:
        if not isinstance(container.get(slot), MutableMapping):
            container[slot] = {}
        container, slot = container[slot], segment

    if not isinstance(container.get(slot), MutableMapping):
        container[slot] = {}
    container[slot][segments[-1]] = value


def unwrap_for_key(file_value: Mapping, base_key: str) -> Any:
    """
    Redundant-nesting heuristic for root-loaded files.

    A file whose whole content is ``{base_key: inner}`` is stored as
    ``inner``; any other mapping is stored whole. This only fires for a
    single-member mapping whose one key equals `base_key`.
    """
    if base_key in file_value and len(file_value) == 1:
        return file_value[base_key]
    return file_value
