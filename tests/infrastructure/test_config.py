"""Tests for settings loading and logging setup."""

import logging
from pathlib import Path

import pytest

from orderdesk.application import compose_draft, order_status
from orderdesk.infrastructure.config import DEFAULT_DATA_DIR, load_settings
from orderdesk.infrastructure.logging_config import get_logger, setup_logging


class TestSettings:

    def test_defaults(self, monkeypatch):
        for var in ("ORDERDESK_DATA_DIR", "ORDERDESK_LOG_LEVEL", "ORDERDESK_CURRENCY"):
            monkeypatch.delenv(var, raising=False)
        settings = load_settings()
        assert settings.data_dir == DEFAULT_DATA_DIR
        assert settings.log_level == "WARNING"
        assert settings.currency == "USD"

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("ORDERDESK_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("ORDERDESK_LOG_LEVEL", "debug")
        monkeypatch.setenv("ORDERDESK_CURRENCY", "eur")
        settings = load_settings()
        assert settings.data_dir == Path(tmp_path)
        assert settings.drafts_file == Path(tmp_path) / "drafts.json"
        assert settings.log_level == "DEBUG"
        assert settings.currency == "EUR"


@pytest.fixture(autouse=True)
def _reset_app_logger():
    yield
    logger = logging.getLogger("orderdesk")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


class TestLogging:

    def test_setup_is_idempotent(self):
        logger = setup_logging("INFO")
        setup_logging("INFO")
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_unknown_level_falls_back_to_warning(self):
        assert setup_logging("CHATTY").level == logging.WARNING

    def test_get_logger_namespaces(self):
        assert get_logger("cli").name == "orderdesk.cli"
        assert get_logger("orderdesk.domain").name == "orderdesk.domain"

    def test_application_loggers_inherit_app_level(self):
        setup_logging("DEBUG")

        for module in (compose_draft, order_status):
            assert module.logger.name.startswith("orderdesk.application.")
            assert module.logger.getEffectiveLevel() == logging.DEBUG
