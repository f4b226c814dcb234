"""
main.py
-------
Command-line entry point for the Survey Sparrow database setup.

Responsibilities:
    - Load the local .env file into the environment.
    - Resolve the connection settings and the execution mode.
    - Apply schema.sql (or only probe the connection with --check).
    - Print progress, the created tables or troubleshooting hints.

Exit code is 0 on success and 1 on any failure.
"""

import argparse
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from config import DEFAULT_APP_MODE, ENV_FILE, SCHEMA_PATH, get_db_config, load_env_file
from db.connection import INSTALL_HINT, load_driver
from db.errors import (
    DatabaseConnectionError,
    InitializationError,
    MissingDependencyError,
    SchemaExecutionError,
    SchemaLoadError,
)
from db.init_db import check_connection, initialize_database
from models.db_config import DbConfig
from models.execution_mode import ExecutionMode
from utils.logger import get_logger, set_level

logger = get_logger(__name__)

TROUBLESHOOTING = (
    "💡 Troubleshooting:\n"
    "   1. Check if MySQL is running\n"
    "   2. Verify database credentials\n"
    "   3. Ensure user has CREATE DATABASE privileges\n"
    "   4. Check connection settings in .env file"
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Create the Survey Sparrow MySQL schema.")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in ExecutionMode],
        default=None,
        help="Execution mode (default: $APP_MODE or 'server').",
    )
    parser.add_argument("--schema", type=Path, default=SCHEMA_PATH, help="Path to the schema file.")
    parser.add_argument("--env-file", type=Path, default=ENV_FILE, help="Path to the .env file.")
    parser.add_argument("--check", action="store_true", help="Only check the database connection.")
    return parser


def print_config(config: DbConfig, schema_path: Path) -> None:
    """Print the resolved connection settings (password hidden) and the schema file."""
    shown = config.masked()
    print("📋 Configuration:")
    print(f"   Host: {shown['host']}")
    print(f"   Port: {shown['port']}")
    print(f"   User: {shown['user']}")
    print(f"   Password: {shown['password']}")
    print(f"   Database: {shown['database']}")
    print(f"   Schema: {schema_path}\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the setup and return the process exit code."""
    args = build_parser().parse_args(argv)

    print("🔧 Database Initialization Script")
    print("==================================\n")

    load_env_file(args.env_file)
    set_level(os.getenv("LOG_LEVEL", "INFO"))
    try:
        mode = ExecutionMode.parse(args.mode or os.getenv("APP_MODE") or DEFAULT_APP_MODE)
    except ValueError as e:
        print(f"❌ {e}")
        return 1

    # ── 1. Driver must be present before anything else ────
    if mode is ExecutionMode.SERVER:
        try:
            load_driver()
        except MissingDependencyError:
            print("❌ PyMySQL package not found")
            print(f"📦 Install it with: {INSTALL_HINT}")
            print("ℹ️  Or run with --mode browser - local browser storage needs no driver\n")
            return 1

    try:
        config = get_db_config()
    except InitializationError as e:
        print(f"❌ Error: {e}")
        return 1
    print_config(config, args.schema)

    # ── 2. Connectivity probe only ────────────────────────
    if args.check:
        if check_connection(config, mode):
            print("✅ Database connection OK")
            return 0
        print("❌ Database connection failed\n")
        print(TROUBLESHOOTING)
        return 1

    # ── 3. Apply the schema ───────────────────────────────
    try:
        tables = initialize_database(config, mode, schema_path=args.schema, report_tables=True)
    except SchemaLoadError as e:
        print(f"❌ {e}")
        return 1
    except (DatabaseConnectionError, SchemaExecutionError) as e:
        print(f"\n❌ Error: {e}\n")
        print(TROUBLESHOOTING)
        return 1
    except InitializationError as e:
        print(f"\n❌ Error: {e}")
        return 1

    if mode is ExecutionMode.SERVER:
        if tables:
            print(f"\n📊 Tables in \"{config.database}\" ({len(tables)} total):")
            for table in tables:
                print(f"   ✓ {table}")
        else:
            print(f"\n⚠️  Database \"{config.database}\" has no tables after applying the schema")

    print("\n✅ Database initialization complete!")
    print("🚀 You can now start your application")
    return 0


if __name__ == "__main__":
    sys.exit(main())
