"""Tests for the once-per-process startup hook used by the front-end."""

from config import get_db_config
from models.execution_mode import ExecutionMode
from services.startup_service import ensure_database
from tests.conftest import FakeConnection, FakeConnector

CONFIG = get_db_config({})


def test_browser_mode_succeeds_without_connecting(schema_file) -> None:
    connector = FakeConnector()
    assert ensure_database(ExecutionMode.BROWSER, CONFIG, schema_file, connector) is True
    assert connector.calls == []


def test_failure_is_logged_not_raised(schema_file, caplog) -> None:
    connector = FakeConnector(refuse=True)
    assert ensure_database(ExecutionMode.SERVER, CONFIG, schema_file, connector) is False
    assert "continuing without it" in caplog.text


def test_missing_schema_is_logged_not_raised(tmp_path) -> None:
    connector = FakeConnector()
    assert ensure_database(ExecutionMode.SERVER, CONFIG, tmp_path / "x.sql", connector) is False
    assert connector.calls == []


def test_runs_only_once_per_process(schema_file) -> None:
    connector = FakeConnector(FakeConnection())
    assert ensure_database(ExecutionMode.SERVER, CONFIG, schema_file, connector) is True
    assert ensure_database(ExecutionMode.SERVER, CONFIG, schema_file, connector) is True
    assert len(connector.calls) == 1


def test_resolves_config_from_environment(schema_file, monkeypatch, clean_env) -> None:
    monkeypatch.setenv("DB_HOST", "env-host")
    connector = FakeConnector()
    ensure_database(ExecutionMode.SERVER, schema_path=schema_file, connector=connector)
    assert connector.calls[0].host == "env-host"


def test_bad_port_is_logged_not_raised(schema_file, monkeypatch, clean_env) -> None:
    monkeypatch.setenv("DB_PORT", "not-a-port")
    connector = FakeConnector()
    assert ensure_database(ExecutionMode.SERVER, schema_path=schema_file, connector=connector) is False
    assert connector.calls == []


def test_plain_string_browser_mode_never_connects(schema_file) -> None:
    connector = FakeConnector()
    assert ensure_database("browser", CONFIG, schema_file, connector) is True
    assert connector.calls == []


def test_unknown_mode_is_logged_not_raised(schema_file, caplog) -> None:
    connector = FakeConnector()
    assert ensure_database("desktop", CONFIG, schema_file, connector) is False
    assert connector.calls == []
    assert "Unknown execution mode" in caplog.text
