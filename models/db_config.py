"""
models/db_config.py
-------------------
Connection settings for the MySQL server.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DbConfig:
    """
    Where and as whom to connect.

    Attributes:
        host: MySQL server hostname.
        port: MySQL server TCP port.
        user: Login name.
        password: Login password (may be empty).
        database: Name of the application database the schema creates.
    """
    host: str
    port: int
    user: str
    password: str
    database: str

    def masked(self) -> dict:
        """Settings safe to print: the password is never shown."""
        return {
            "host": self.host,
            "port": self.port,
            "user": self.user,
            "password": "***" if self.password else "(empty)",
            "database": self.database,
        }

    def __str__(self) -> str:
        return f"{self.user}@{self.host}:{self.port}/{self.database}"
