# rootconf/envloader.py
"""
rootconf.envloader
------------------

Loads a ``.env`` file from the project root into ``os.environ``.
Parsing is delegated to python-dotenv. Loading is immutable: variables
already present in the process environment are never overwritten.
"""

import os
import logging
from pathlib import Path
from typing import Dict

from dotenv import dotenv_values, load_dotenv
from dotenv.parser import parse_stream

from .exceptions import EnvFileLoadError, EnvFileNotFoundError
from .utils import PathLike

log = logging.getLogger(__name__)

DEFAULT_ENV_FILE = ".env"


def load_env(root_path: PathLike, env_file: str = DEFAULT_ENV_FILE, strict: bool = False) -> Dict[str, str]:
    """
    Load `<root_path>/<env_file>` into the process environment.

    Args:
        root_path: The discovered project root.
        env_file: Name of the dotenv file relative to the root.
        strict: If True a missing file raises EnvFileNotFoundError,
                otherwise it is silently ignored.

    Returns:
        The variables this call actually applied (name -> value). Variables
        that were already set in the process environment are not included.

    Raises:
        EnvFileNotFoundError: strict mode and the file does not exist.
        EnvFileLoadError: the file exists but could not be read or parsed.
    """
    env_path = Path(root_path) / env_file

    if not env_path.is_file():
        if strict:
            raise EnvFileNotFoundError(env_path)
        log.debug(f"DEBUG [rootconf.load_env]: No env file at {env_path}, skipping.")
        return {}

    try:
        _check_syntax(env_path)
        values = dotenv_values(env_path)
        applied = {
            name: value for name, value in values.items()
            if value is not None and name not in os.environ
        }
        load_dotenv(dotenv_path=env_path, override=False)
    except EnvFileLoadError:
        raise
    except Exception as e:
        raise EnvFileLoadError(env_path, e) from e

    log.debug(f"DEBUG [rootconf.load_env]: Loaded {len(applied)} of {len(values)} variables from {env_path}.")
    return applied


def _check_syntax(env_path: Path):
    """Reject the file if python-dotenv cannot parse any of its statements."""
    with open(env_path, encoding='utf-8') as stream:
        for binding in parse_stream(stream):
            if binding.error:
                raise EnvFileLoadError(env_path, f"could not parse statement at line {binding.original.line}")
