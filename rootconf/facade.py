# rootconf/facade.py
"""
rootconf.facade
---------------

Static access to the default store::

    from rootconf.facade import Config

    Config.get("database.connections.mysql.host", "localhost")
"""

from typing import Any, Dict, Optional

from . import store


class Config:
    """Static pass-through API over `rootconf.store.get_store()`."""

    def __new__(cls, *args, **kwargs):
        raise TypeError("Config is a static facade and cannot be instantiated.")

    @staticmethod
    def get(key: str, default: Any = None) -> Any:
        return store.get_store().get(key, default)

    @staticmethod
    def load_from_root(filename: str, key: Optional[str] = None, default: Any = None) -> Any:
        return store.get_store().load_from_root(filename, key, default)

    @staticmethod
    def set(key: str, value: Any) -> bool:
        return store.get_store().set(key, value)

    @staticmethod
    def set_or_fail(key: str, value: Any):
        store.get_store().set_or_fail(key, value)

    @staticmethod
    def set_from_root(filename: str, key: str, value: Any, create_path: bool = True) -> bool:
        return store.get_store().set_from_root(filename, key, value, create_path)

    @staticmethod
    def has(key: str) -> bool:
        return store.get_store().has(key)

    @staticmethod
    def all() -> Dict[str, Any]:
        return store.get_store().all()

    @staticmethod
    def get_root_path():
        return store.get_store().get_root_path()

    @staticmethod
    def reset():
        """Drop the default store, primarily for tests."""
        store.reset()
