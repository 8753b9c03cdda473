# rootconf/__init__.py
"""
rootconf – Project-root configuration accessor.

Locates the project root, loads its ``.env`` file and reads every TOML/JSON
file under ``<root>/config`` into a flat mapping addressed with dot notation.

Import `ConfigStore` (or `get_store`/`reset`) from `rootconf.store`, the static
`Config` facade from `rootconf.facade`, `config()`/`env()` from
`rootconf.helpers` and the exceptions from `rootconf.exceptions`.
"""

__version__ = "0.1.0"
