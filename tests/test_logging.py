"""Test logging setup."""

import logging

import pytest

from aurumx import logging as aurumx_logging


@pytest.fixture
def app_logger(tmp_path, monkeypatch):
    """Log into tmp_path and restore the aurumx logger afterwards."""
    monkeypatch.setattr(aurumx_logging, "LOG_DIR", tmp_path / "logs")
    logger = logging.getLogger("aurumx")
    saved = (logger.handlers[:], logger.level, logger.propagate)
    logger.handlers.clear()

    yield logger

    for handler in logger.handlers:
        handler.close()
    logger.handlers[:], level, logger.propagate = saved
    logger.setLevel(level)


def handler_types(logger: logging.Logger) -> list[type]:
    return sorted((type(h) for h in logger.handlers), key=lambda t: t.__name__)


class TestSetupLogging:
    """Test setup_logging."""

    def test_console_and_file(self, app_logger, tmp_path):
        logger = aurumx_logging.setup_logging()

        assert logger is app_logger
        assert handler_types(logger) == [logging.FileHandler, logging.StreamHandler]
        assert len(list((tmp_path / "logs").glob("signals_*.log"))) == 1

    def test_tui_mode_keeps_file_only(self, app_logger):
        aurumx_logging.setup_logging(console=False)
        assert handler_types(app_logger) == [logging.FileHandler]

    def test_level_name(self, app_logger):
        aurumx_logging.setup_logging("debug", log_to_file=False)
        assert app_logger.level == logging.DEBUG

    def test_reconfigure_replaces_handlers(self, app_logger):
        aurumx_logging.setup_logging()
        aurumx_logging.setup_logging(console=False, log_to_file=False)

        assert app_logger.handlers == []

    def test_sdk_loggers_quietened(self, app_logger):
        aurumx_logging.setup_logging("DEBUG", log_to_file=False)
        assert logging.getLogger("binance_common").level == logging.WARNING

    def test_module_logger_writes_to_file(self, app_logger, tmp_path):
        aurumx_logging.setup_logging(console=False)

        logging.getLogger("aurumx.bot").info("Signal bot started")
        for handler in app_logger.handlers:
            handler.flush()

        log_file = next((tmp_path / "logs").glob("signals_*.log"))
        assert "aurumx.bot | Signal bot started" in log_file.read_text(encoding="utf-8")
