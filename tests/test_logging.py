"""Tests for root logger configuration."""

import logging

import pytest

from edition_mirror.logging import configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_configures_console_and_file(restore_root_logger, tmp_path):
    log_file = tmp_path / "mirror.log"

    configure_logging("debug", log_file=str(log_file))
    logging.getLogger("edition_mirror.test").info("hello")

    root = restore_root_logger
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 2
    assert "hello" in log_file.read_text(encoding="utf-8")


def test_quiets_http_client_loggers(restore_root_logger):
    configure_logging("INFO")

    assert logging.getLogger("httpx").level == logging.WARNING
    assert len(restore_root_logger.handlers) == 1
