"""Shared fixtures: a fake MySQL connection and a connector that records its use."""

from contextlib import contextmanager

import pytest

from db.errors import DatabaseConnectionError
from services import startup_service


class FakeCursor:
    def __init__(self, conn):
        self.conn = conn
        self._rows = []

    def __enter__(self):
        return self

    def __exit__(self, *args):
        return False

    def execute(self, sql, params=None):
        self.conn.executed.append((sql, params))
        if self.conn.fail_on_execute is not None:
            raise self.conn.fail_on_execute
        if sql.startswith("SHOW DATABASES"):
            self._rows = [(params[0],)] if self.conn.tables is not None else []
        elif sql.startswith("SHOW TABLES"):
            self._rows = [(t,) for t in self.conn.tables or []]
        else:
            self._rows = [(1,)]
        return len(self._rows)

    def nextset(self):
        if self.conn.fail_on_nextset is not None:
            raise self.conn.fail_on_nextset
        return None

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def fetchall(self):
        return list(self._rows)


class FakeConnection:
    def __init__(self, tables=None, fail_on_execute=None, fail_on_nextset=None):
        self.tables = tables
        self.fail_on_execute = fail_on_execute
        self.fail_on_nextset = fail_on_nextset
        self.executed = []
        self.commits = 0
        self.close_count = 0

    def cursor(self):
        return FakeCursor(self)

    def commit(self):
        self.commits += 1

    def close(self):
        self.close_count += 1


class FakeConnector:
    """Stands in for db.connection.open_connection."""

    def __init__(self, conn=None, refuse=False):
        self.conn = conn or FakeConnection()
        self.refuse = refuse
        self.calls = []

    @contextmanager
    def __call__(self, config):
        self.calls.append(config)
        if self.refuse:
            raise DatabaseConnectionError(f"Cannot connect to MySQL at {config.host}:{config.port}")
        try:
            yield self.conn
        finally:
            self.conn.close()


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "schema.sql"
    path.write_text(
        "CREATE DATABASE IF NOT EXISTS app; USE app; CREATE TABLE t (id INT);",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("DB_HOST", "DB_PORT", "DB_USER", "DB_PASSWORD", "DB_NAME", "APP_MODE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_startup():
    startup_service.reset()
    yield
    startup_service.reset()
