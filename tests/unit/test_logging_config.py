"""
Unit tests for logging setup.
"""

import logging
from logging.handlers import RotatingFileHandler

import pytest
from src.logging_config import SESSION_LOGS_KEPT, setup_logging


@pytest.fixture(autouse=True)
def restore_root_handlers():
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            handler.close()
            root_logger.removeHandler(handler)


def test_console_only():
    assert setup_logging(log_file=None) is None
    assert not any(isinstance(handler, RotatingFileHandler) for handler in logging.getLogger().handlers)


def test_session_file_is_created(tmp_path):
    session_log = setup_logging(log_file=str(tmp_path / "logs" / "faq-search.log"))

    logging.getLogger("src.search.corpus").warning("partial corpus")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert session_log.parent == tmp_path / "logs"
    assert session_log.name.startswith("faq-search_")
    assert "partial corpus" in session_log.read_text()


def test_old_session_logs_are_pruned(tmp_path):
    log_dir = tmp_path / "logs"
    log_dir.mkdir()
    for day in range(1, 9):
        (log_dir / f"faq-search_2026010{day}_120000.log").write_text("old")

    setup_logging(log_file=str(log_dir / "faq-search.log"))

    assert len(list(log_dir.glob("faq-search_*.log"))) == SESSION_LOGS_KEPT
    assert not (log_dir / "faq-search_20260101_120000.log").exists()


def test_noisy_loggers_are_quiet():
    setup_logging(log_file=None)
    assert logging.getLogger("httpx").level == logging.WARNING
