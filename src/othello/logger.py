"""
Logging utilities for the Othello rules engine.
"""
import os
import logging
from typing import List, Optional

from .config import Config


class Logger:
    """Console and file logging for a game session."""

    def __init__(self, config: Config, log_dir: Optional[str] = None):
        """
        Initialize the logger.

        Args:
            config: Configuration object
            log_dir: Directory to save logs (default: config.logging.log_dir)
        """
        self.config = config
        self.log_dir = log_dir or config.logging.log_dir
        self.handlers: List[logging.Handler] = []
        level = logging.getLevelName(config.logging.log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {config.logging.log_level}")

        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

        # Set up console logging
        self.console = logging.StreamHandler()
        self.console.setLevel(level)
        self.console.setFormatter(formatter)
        self.handlers.append(self.console)

        # Set up file logging
        if config.logging.log_to_file:
            os.makedirs(self.log_dir, exist_ok=True)
            log_file = os.path.join(self.log_dir, config.logging.log_file)
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.handlers.append(file_handler)

        # Configure the package logger
        self.logger = logging.getLogger(__package__)
        self.logger.setLevel(level)
        for handler in self.handlers:
            self.logger.addHandler(handler)

    def log_board(self, board) -> None:
        """Log the board dump and the current score."""
        black, white = board.get_score()
        self.logger.info("Board:\n%s\nScore - Black: %d, White: %d", board, black, white)

    def close(self):
        """Close the logger and remove the handlers it added."""
        for handler in self.handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self.handlers = []


def setup_logger(config: Config) -> Logger:
    """
    Set up and return a logger instance.

    Args:
        config: Configuration object

    Returns:
        Logger instance
    """
    return Logger(config)
