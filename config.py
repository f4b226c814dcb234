"""
config.py
---------
Central configuration module. Knows where the application files live,
loads the optional .env file into the process environment and resolves
the database connection settings into a single DbConfig value.
"""

import os
from pathlib import Path
from typing import Mapping, Optional

from dotenv import dotenv_values

from db.errors import ConfigError
from models.db_config import DbConfig

# ── Paths ─────────────────────────────────────────────────
BASE_DIR: Path = Path(__file__).resolve().parent
SCHEMA_PATH: Path = BASE_DIR / "schema.sql"
ENV_FILE: Path = BASE_DIR / ".env"

# ── MySQL defaults ────────────────────────────────────────
DEFAULT_DB_HOST: str = "localhost"
DEFAULT_DB_PORT: int = 3306
DEFAULT_DB_USER: str = "root"
DEFAULT_DB_PASSWORD: str = ""
DEFAULT_DB_NAME: str = "survey_sparrow"

# ── Runtime ───────────────────────────────────────────────
DEFAULT_APP_MODE: str = "server"


def load_env_file(path: Path = ENV_FILE) -> dict[str, str]:
    """
    Inject KEY=VALUE pairs from a local env file into os.environ.

    Lines without a key or without a value are skipped. Values from the
    file replace whatever the environment already holds.

    Args:
        path: Location of the env file. A missing file is not an error.

    Returns:
        The pairs that were applied.
    """
    if not path.is_file():
        return {}

    applied: dict[str, str] = {}
    for key, value in dotenv_values(path).items():
        key = (key or "").strip()
        value = (value or "").strip()
        if key and value:
            os.environ[key] = value
            applied[key] = value
    return applied


def _env(environ: Mapping[str, str], name: str, default: str) -> str:
    value = environ.get(name)
    return value if value else default


def get_db_config(environ: Optional[Mapping[str, str]] = None) -> DbConfig:
    """
    Resolve the connection settings from DB_* variables.

    Unset and empty variables both fall back to the defaults above.

    Raises:
        ConfigError: If DB_PORT is not an integer.
    """
    env = os.environ if environ is None else environ

    raw_port = _env(env, "DB_PORT", str(DEFAULT_DB_PORT))
    try:
        port = int(raw_port)
    except ValueError as e:
        raise ConfigError(f"DB_PORT must be an integer, got {raw_port!r}", e) from e

    return DbConfig(
        host=_env(env, "DB_HOST", DEFAULT_DB_HOST),
        port=port,
        user=_env(env, "DB_USER", DEFAULT_DB_USER),
        password=_env(env, "DB_PASSWORD", DEFAULT_DB_PASSWORD),
        database=_env(env, "DB_NAME", DEFAULT_DB_NAME),
    )
