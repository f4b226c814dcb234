"""
db/schema_loader.py
-------------------
Reads the static schema document (schema.sql) from disk.
"""

from pathlib import Path

from config import SCHEMA_PATH
from db.errors import SchemaNotFoundError, SchemaReadError
from utils.logger import get_logger

logger = get_logger(__name__)


def load_schema(path: Path = SCHEMA_PATH) -> str:
    """
    Return the full text of the schema file.

    Args:
        path: Schema file location, defaults to schema.sql in the application root.

    Raises:
        SchemaNotFoundError: If the file does not exist.
        SchemaReadError: For any other I/O or decoding failure.
    """
    path = Path(path)
    logger.info(f"Reading schema from: {path}")
    try:
        schema = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        logger.error(f"Schema file not found: {path}")
        raise SchemaNotFoundError(path, f"Schema file not found: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read schema file {path}: {e}")
        raise SchemaReadError(path, f"Failed to read schema file {path}: {e}") from e

    logger.info(f"Schema file loaded ({len(schema)} characters).")
    return schema
