from __future__ import annotations

import logging

import pytest

from src.config.settings import Settings
from src.interfaces.http.main import create_app


@pytest.fixture()
def sql_logger():
    logger = logging.getLogger("sqlalchemy.engine")
    previous = logger.level
    yield logger
    logger.setLevel(previous)


def _settings(tmp_path, **overrides) -> Settings:
    values = {
        "database_url": f"sqlite+aiosqlite:///{tmp_path / 'logging.db'}",
        "log_level": "DEBUG",
        "table_owner": None,
    }
    values.update(overrides)
    return Settings.model_validate(values)


def test_sql_is_quiet_when_echo_is_off(tmp_path, sql_logger):
    create_app(settings=_settings(tmp_path, db_echo=False))
    assert sql_logger.level == logging.WARNING
    assert not sql_logger.isEnabledFor(logging.INFO)


def test_sql_is_logged_when_echo_is_on(tmp_path, sql_logger):
    create_app(settings=_settings(tmp_path, log_level="WARNING", db_echo=True))
    assert sql_logger.level == logging.INFO


def test_app_level_applies_to_uvicorn(tmp_path, sql_logger):
    create_app(settings=_settings(tmp_path, log_level="ERROR"))
    assert logging.getLogger("uvicorn.access").level == logging.ERROR
    assert sql_logger.level == logging.WARNING
