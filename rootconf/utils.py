# rootconf/utils.py
"""
rootconf.utils
--------------

Path helpers for turning a caller-supplied project root (or discovery start
directory) into an absolute path.
"""

import os
from pathlib import Path
from typing import Optional, Union

# Directory of the installed package; root discovery starts here, not at the CWD.
MODULE_DIR = Path(__file__).resolve().parent

PathLike = Union[str, os.PathLike]


def expand_path(path: Optional[PathLike]) -> Optional[str]:
    """``~`` and ``$VAR`` expansion, so ``ConfigStore(root_path="$APP_HOME")`` works."""
    if path is None:
        return None
    return os.path.expandvars(os.path.expanduser(os.fspath(path)))


def resolve_path(path: Optional[PathLike]) -> Optional[Path]:
    """
    Absolute, symlink-free form of an explicit `root_path` or `start_dir`.

    The store keeps this value for its whole lifetime, so config and .env
    lookups stay stable if the process later changes directory.
    """
    expanded = expand_path(path)
    if expanded is None:
        return None
    return Path(expanded).resolve()
