# rootconf/locator.py
"""
rootconf.locator
----------------

Project root discovery.

The root is the first directory, walking upward from a starting point, that
contains one of the marker paths. By default the marker is the bootstrap file
of a project virtual environment (``.venv/pyvenv.cfg``), so a copy of rootconf
installed at ``<project>/.venv/lib/pythonX.Y/site-packages/rootconf`` finds
``<project>``.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

from .utils import MODULE_DIR, PathLike, resolve_path

log = logging.getLogger(__name__)

DEFAULT_MARKERS = (".venv/pyvenv.cfg",)
MAX_SEARCH_DEPTH = 10


def locate_root(start_dir: Optional[PathLike] = None,
                markers: Iterable[str] = DEFAULT_MARKERS,
                max_depth: int = MAX_SEARCH_DEPTH) -> Optional[Path]:
    """
    Walk parent directories from `start_dir` looking for a root marker.

    Args:
        start_dir: Directory to start from. Defaults to the rootconf package
                   directory, not the caller's working directory.
        markers: Relative paths whose presence identifies the root. A marker
                 may be a directory (``".venv"``) or a file inside one
                 (``".venv/pyvenv.cfg"``).
        max_depth: Maximum number of directories to inspect.

    Returns:
        The first directory containing any marker, or None if the filesystem
        root or the step budget was reached first.
    """
    markers = tuple(markers)
    current = resolve_path(start_dir) if start_dir is not None else MODULE_DIR

    for _ in range(max_depth):
        for marker in markers:
            if (current / marker).exists():
                log.debug(f"DEBUG [rootconf.locate_root]: Found marker '{marker}' in {current}")
                return current
        parent = current.parent
        if parent == current:
            log.debug("DEBUG [rootconf.locate_root]: Reached filesystem root without a marker.")
            return None
        current = parent

    log.debug(f"DEBUG [rootconf.locate_root]: No marker found within {max_depth} levels.")
    return None
