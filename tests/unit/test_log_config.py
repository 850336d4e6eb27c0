"""Unit tests for per-category logging levels."""

import logging

from trackmaster.config import Settings
from trackmaster.infrastructure.logging.log_config import setup_logging


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, jwt_key="k", **overrides)


def test_category_levels_follow_settings():
    applied = setup_logging(_settings(log_level_sql="ERROR", log_level_lookup="DEBUG"))

    assert logging.getLogger("sqlalchemy.engine").level == logging.ERROR
    assert logging.getLogger("trackmaster.infrastructure.lookup").level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING
    assert applied["sqlalchemy.engine"] == logging.ERROR


def test_unknown_level_name_falls_back_to_info():
    applied = setup_logging(_settings(log_level_http="chatty"))
    assert applied["httpx"] == logging.INFO
