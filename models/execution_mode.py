"""
models/execution_mode.py
------------------------
Where the application is running, decided once by the entry point.
"""

from enum import Enum


class ExecutionMode(str, Enum):
    """
    BROWSER: interactive front-end; persistence lives in local browser storage.
    SERVER: headless process; the MySQL schema must be applied.
    """
    BROWSER = "browser"
    SERVER = "server"

    @classmethod
    def parse(cls, value: "ExecutionMode | str") -> "ExecutionMode":
        """Case-insensitive lookup by value, e.g. ``ExecutionMode.parse("Server")``."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown execution mode {value!r} (expected one of: {choices})")
