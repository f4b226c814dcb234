"""
db/errors.py
------------
Exceptions raised while loading the schema or initializing the database.
"""

from pathlib import Path
from typing import Optional


class InitializationError(Exception):
    """Database initialization failed. ``cause`` holds the underlying error, if any."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class MissingDependencyError(InitializationError):
    """The MySQL client library (PyMySQL) is not installed."""


class ConfigError(InitializationError):
    """A configuration value cannot be used."""


class DatabaseConnectionError(InitializationError):
    """The MySQL server could not be reached or refused the credentials."""


class SchemaExecutionError(InitializationError):
    """The MySQL server rejected the schema."""


class SchemaLoadError(Exception):
    """The schema document could not be read."""

    def __init__(self, path: Path, message: str):
        super().__init__(message)
        self.path = path


class SchemaNotFoundError(SchemaLoadError):
    """The schema file does not exist."""


class SchemaReadError(SchemaLoadError):
    """The schema file exists but reading it failed."""
