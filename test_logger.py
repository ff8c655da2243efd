"""
Tests for the logging setup.
"""
import logging

import pytest

from othello import Board, get_default_config
from othello.logger import setup_logger


def test_console_logging(caplog):
    """Placements are logged at DEBUG through the package logger."""
    config = get_default_config()
    config.logging.log_level = "DEBUG"
    logger = setup_logger(config)
    try:
        assert logging.getLogger("othello").level == logging.DEBUG
        with caplog.at_level(logging.DEBUG, logger="othello"):
            Board().place_piece((2, 3), "black")
        assert any("black played (2, 3), flipped 1" in r.getMessage() for r in caplog.records)
    finally:
        logger.close()
    assert logger.handlers == []


def test_file_logging(tmp_path):
    """Board dumps are written to the log file when enabled."""
    config = get_default_config()
    config.logging.log_to_file = True
    config.logging.log_dir = str(tmp_path / "logs")
    logger = setup_logger(config)
    try:
        logger.log_board(Board())
    finally:
        logger.close()

    content = (tmp_path / "logs" / "othello.log").read_text()
    assert " 3 |...WB..." in content
    assert "Score - Black: 2, White: 2" in content


def test_unknown_log_level():
    config = get_default_config()
    config.logging.log_level = "LOUD"
    with pytest.raises(ValueError):
        setup_logger(config)
