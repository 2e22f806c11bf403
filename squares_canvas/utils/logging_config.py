"""
Centralized logging configuration for Squares Canvas

Handlers attach to the package logger, so an application embedding the
state machine keeps control of its own root logger.
"""
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..config import Config


class LoggingConfig:
    """Central logging configuration"""

    _initialized = False
    _log_file_path: Optional[Path] = None
    _handlers: List[logging.Handler] = []

    @classmethod
    def setup_logging(cls, log_dir: Path, console_level: int = logging.INFO):
        """
        Attach a DEBUG file handler and a console handler to the package logger

        Calling again before shutdown() does nothing.

        Args:
            log_dir: Directory for the log file, created if missing
            console_level: Threshold for terminal output
        """
        if cls._initialized:
            return

        log_dir.mkdir(parents=True, exist_ok=True)
        cls._log_file_path = log_dir / Config.LOG_FILE_NAME

        cls._handlers = [
            cls._file_handler(cls._log_file_path),
            cls._console_handler(console_level),
        ]

        package_logger = logging.getLogger(Config.LOG_ROOT_LOGGER)
        package_logger.setLevel(logging.DEBUG)
        for handler in cls._handlers:
            package_logger.addHandler(handler)

        cls._initialized = True
        package_logger.info(f"Logging to {cls._log_file_path}")

    @staticmethod
    def _file_handler(path: Path) -> logging.Handler:
        handler = logging.FileHandler(path, encoding='utf-8')
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(logging.Formatter(Config.LOG_FILE_FORMAT, datefmt=Config.LOG_DATE_FORMAT))
        return handler

    @staticmethod
    def _console_handler(level: int) -> logging.Handler:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(Config.LOG_CONSOLE_FORMAT))
        return handler

    @classmethod
    def shutdown(cls):
        """Detach and close the handlers added by setup_logging()"""
        package_logger = logging.getLogger(Config.LOG_ROOT_LOGGER)
        for handler in cls._handlers:
            package_logger.removeHandler(handler)
            handler.close()
        cls._handlers = []
        cls._log_file_path = None
        cls._initialized = False

    @classmethod
    def is_initialized(cls) -> bool:
        return cls._initialized

    @classmethod
    def get_logger(cls, name: str):
        """Get a logger instance"""
        return logging.getLogger(name)

    @classmethod
    def get_log_file_path(cls) -> Optional[Path]:
        """Get the log file path"""
        return cls._log_file_path


__all__ = ['LoggingConfig']
