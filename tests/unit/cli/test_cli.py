"""Tests for the catalog command-line interface."""

from unittest.mock import patch

from sqlalchemy import inspect
from typer.testing import CliRunner

from src.catalog.cli import app
from src.catalog.runtime.config.config_data import ConfigData
from src.catalog.runtime.context import with_context

runner = CliRunner()


def test_init_db_creates_book_table(tmp_path):
    db_file = tmp_path / "catalog.db"
    override = ConfigData()
    override.database.url = f"sqlite:///{db_file}"

    with with_context(override):
        result = runner.invoke(app, ["init-db"])

    assert result.exit_code == 0, result.output
    assert "Database initialized" in result.output

    from sqlmodel import create_engine

    engine = create_engine(f"sqlite:///{db_file}")
    try:
        assert "book" in inspect(engine).get_table_names()
    finally:
        engine.dispose()


def test_serve_uses_configured_bind_address():
    with patch("uvicorn.run") as run:
        result = runner.invoke(app, ["serve", "--port", "9100"])

    assert result.exit_code == 0, result.output
    _, kwargs = run.call_args
    assert kwargs["port"] == 9100
    assert kwargs["reload"] is False


def test_no_arguments_shows_help():
    result = runner.invoke(app, [])

    assert "init-db" in result.output
