"""
services/startup_service.py
---------------------------
Startup hook for the front-end application.

Initialization failures are logged, not raised, so the application keeps
loading in degraded mode even when the schema could not be applied.
"""

from pathlib import Path
from typing import Optional

from config import SCHEMA_PATH, get_db_config
from db.connection import open_connection
from db.errors import InitializationError, SchemaLoadError
from db.init_db import Connector, initialize_database
from models.db_config import DbConfig
from models.execution_mode import ExecutionMode
from utils.logger import get_logger

logger = get_logger(__name__)

_outcome: Optional[bool] = None


def ensure_database(
    mode: ExecutionMode | str,
    config: Optional[DbConfig] = None,
    schema_path: Path = SCHEMA_PATH,
    connector: Connector = open_connection,
) -> bool:
    """
    Run the database initializer at most once per process.

    Args:
        mode: Where the application runs.
        config: Connection settings; resolved from the environment when omitted.
        schema_path: Location of the schema document.
        connector: Connection factory handed to the initializer.

    Returns:
        True if initialization succeeded (now or on the first call), False otherwise.
    """
    global _outcome
    if _outcome is not None:
        logger.debug("Database initialization already attempted in this process.")
        return _outcome

    try:
        mode = ExecutionMode.parse(mode)
        if config is None:
            config = get_db_config()
        initialize_database(config, mode, schema_path=schema_path, connector=connector)
        _outcome = True
    except (InitializationError, SchemaLoadError, ValueError) as e:
        logger.error(f"Database initialization failed, continuing without it: {e}")
        _outcome = False
    return _outcome


def reset() -> None:
    """Forget the previous outcome so the next call initializes again."""
    global _outcome
    _outcome = None
