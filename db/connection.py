"""
db/connection.py
----------------
Opens the single short-lived MySQL connection used to apply the schema.
PyMySQL is imported lazily so browser mode runs without it installed.
"""

from contextlib import contextmanager
from typing import Iterator

from db.errors import DatabaseConnectionError, MissingDependencyError
from models.db_config import DbConfig
from utils.logger import get_logger

logger = get_logger(__name__)

INSTALL_HINT = "pip install PyMySQL"


def load_driver():
    """
    Import and return the PyMySQL module.

    Raises:
        MissingDependencyError: If PyMySQL is not installed.
    """
    try:
        import pymysql
    except ImportError as e:
        logger.error(f"PyMySQL package not found. Install it with: {INSTALL_HINT}")
        raise MissingDependencyError(
            f"PyMySQL package not found. Install it with: {INSTALL_HINT}", e
        ) from e
    return pymysql


@contextmanager
def open_connection(config: DbConfig) -> Iterator:
    """
    Connect to the MySQL server with multi-statement execution enabled.

    No database is selected: the schema is expected to create and USE it.
    The connection is closed when the block exits, whatever happens inside it.

    Args:
        config: Resolved connection settings.

    Yields:
        A pymysql connection.

    Raises:
        MissingDependencyError: If PyMySQL is not installed.
        DatabaseConnectionError: If the server is unreachable or rejects the login.
    """
    pymysql = load_driver()
    from pymysql.constants import CLIENT

    logger.info(f"Connecting to MySQL server at {config.host}:{config.port} as {config.user}...")
    try:
        conn = pymysql.connect(
            host=config.host,
            port=config.port,
            user=config.user,
            password=config.password,
            client_flag=CLIENT.MULTI_STATEMENTS,
        )
    except pymysql.MySQLError as e:
        logger.error(f"Failed to connect to MySQL at {config.host}:{config.port}: {e}")
        raise DatabaseConnectionError(
            f"Cannot connect to MySQL at {config.host}:{config.port}: {e}", e
        ) from e

    logger.info("Connected to MySQL server.")
    try:
        yield conn
    finally:
        conn.close()
        logger.info("MySQL connection closed.")
