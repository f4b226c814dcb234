"""
db/init_db.py
-------------
Applies schema.sql to the MySQL server when running server-side.
In browser mode nothing is touched: local browser storage is the persistence layer.

Run through the command-line adapter:
    python main.py
"""

from pathlib import Path
from typing import Callable, ContextManager

from config import SCHEMA_PATH
from db.connection import open_connection
from db.errors import DatabaseConnectionError, InitializationError, SchemaExecutionError
from db.schema_loader import load_schema
from models.db_config import DbConfig
from models.execution_mode import ExecutionMode
from utils.logger import get_logger

logger = get_logger(__name__)

Connector = Callable[[DbConfig], ContextManager]


def execute_schema(conn, schema: str) -> None:
    """
    Send the whole schema to the server as one batch.

    Every result set is drained so that a failing statement later in the
    batch is reported instead of being left unread on the connection.
    """
    with conn.cursor() as cur:
        cur.execute(schema)
        while cur.nextset():
            pass
    conn.commit()


def fetch_tables(conn, database: str) -> list[str]:
    """
    List the tables of ``database``, or an empty list if it does not exist.
    """
    with conn.cursor() as cur:
        cur.execute("SHOW DATABASES LIKE %s", (database,))
        if cur.fetchone() is None:
            return []
        quoted = database.replace("`", "``")
        cur.execute(f"SHOW TABLES FROM `{quoted}`")
        return [row[0] for row in cur.fetchall()]


def initialize_database(
    config: DbConfig,
    mode: ExecutionMode | str,
    schema_path: Path = SCHEMA_PATH,
    connector: Connector = open_connection,
    report_tables: bool = False,
) -> list[str]:
    """
    Load the schema and, in server mode, apply it to the MySQL server.

    The schema is always read first, so a missing file fails before any
    connection is attempted. Nothing is retried.

    Args:
        config: Resolved connection settings.
        mode: Where the application runs, decided by the caller.
        schema_path: Location of the schema document.
        connector: Context manager factory yielding an open connection.
        report_tables: Also list the tables of ``config.database`` afterwards.

    Returns:
        The tables found when ``report_tables`` is set, otherwise an empty list.

    Raises:
        SchemaLoadError: The schema file is missing or unreadable (propagated unchanged).
        InitializationError: Connecting or executing the schema failed.
    """
    mode = ExecutionMode.parse(mode)
    logger.info("Initializing database...")
    schema = load_schema(schema_path)

    if mode is ExecutionMode.BROWSER:
        logger.info("Running in browser mode - using local browser storage.")
        logger.info("The MySQL schema is available for server-side deployment.")
        return []

    tables: list[str] = []
    try:
        with connector(config) as conn:
            try:
                execute_schema(conn, schema)
            except Exception as e:
                logger.error(f"Failed to execute schema: {e}")
                raise SchemaExecutionError(f"Failed to execute schema: {e}", e) from e
            logger.info("Database and tables created successfully.")

            if report_tables:
                tables = fetch_tables(conn, config.database)
    except InitializationError:
        raise
    except Exception as e:
        logger.error(f"Error initializing database: {e}")
        raise InitializationError(f"Error initializing database: {e}", e) from e

    logger.info("Database initialization complete.")
    return tables


def check_connection(
    config: DbConfig,
    mode: ExecutionMode | str,
    connector: Connector = open_connection,
) -> bool:
    """
    Report whether the database is usable.

    Browser mode is always healthy. In server mode a connection is opened
    and ``SELECT 1`` is run.
    """
    if ExecutionMode.parse(mode) is ExecutionMode.BROWSER:
        return True

    try:
        with connector(config) as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT 1")
                cur.fetchone()
    except DatabaseConnectionError:
        return False
    except Exception as e:
        logger.error(f"Database connection check failed: {e}")
        return False
    return True
