# rootconf/exceptions.py
"""
rootconf.exceptions
-------------------

Custom exceptions for rootconf.

Every error raised by the package derives from `ConfigError`, so callers
embedding a store can treat construction failures as one startup failure.
"""


class ConfigError(Exception):
    """
    Base error for rootconf, also raised for structural violations such as
    writing a nested path through a value that is not a mapping.
    """


class RootNotFoundError(ConfigError):
    """
    Raised when no project root marker was found within the search budget.
    """

    def __init__(self, start_dir=None, max_depth=None):
        message = "Project root not found. Make sure a virtual environment (.venv) exists"
        if start_dir is not None:
            message += f" above {start_dir}"
        if max_depth is not None:
            message += f" (searched {max_depth} levels)"
        super().__init__(message + ".")
        self.start_dir = start_dir
        self.max_depth = max_depth


class EnvFileNotFoundError(ConfigError):
    """
    Raised in strict mode when the .env file is missing.
    """

    def __init__(self, path):
        super().__init__(f"Environment file not found at: {path}")
        self.path = path


class EnvFileLoadError(ConfigError):
    """
    Raised when the .env file exists but could not be read or parsed.
    """

    def __init__(self, path, reason):
        super().__init__(f"Failed to load environment file {path}: {reason}")
        self.path = path


class ConfigFileError(ConfigError):
    """
    Raised when a configuration source file could not be evaluated.
    """

    def __init__(self, path, reason):
        super().__init__(f"Error loading/parsing file {path}: {reason}")
        self.path = path


class ConfigKeyNotFoundError(ConfigError):
    """
    Raised by `set_or_fail` when the key does not already exist.
    """

    def __init__(self, key):
        super().__init__(f"Configuration key '{key}' does not exist and cannot be set.")
        self.key = key
