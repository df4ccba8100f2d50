"""Tests for the logging setup."""

import logging
import sys

from randkit.config.logging import ROOT_LOGGER, get_logger, setup_logging


def test_loggers_live_under_randkit():
    assert get_logger("randkit.engines").name == "randkit.engines"
    assert get_logger("myplugin").name == "randkit.myplugin"


def test_setup_logging_replaces_handlers(tmp_path):
    log_file = tmp_path / "randkit.log"
    setup_logging("DEBUG", log_file=log_file)
    setup_logging("INFO")
    logger = logging.getLogger(ROOT_LOGGER)
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert logger.handlers[0].stream is sys.stderr
    assert logger.propagate is False
    setup_logging()


def test_file_handler_receives_records(tmp_path):
    log_file = tmp_path / "randkit.log"
    setup_logging("INFO", log_file=log_file)
    get_logger("randkit.test").info("hello from the test")
    for handler in logging.getLogger(ROOT_LOGGER).handlers:
        handler.flush()
    assert "hello from the test" in log_file.read_text(encoding="utf-8")
    setup_logging()
