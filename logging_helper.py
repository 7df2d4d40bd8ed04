"""
Unified logging helper for consistent logging across the application.

This module provides a centralized logging system so every module gets
the same formatting and handlers.

Usage:
    from logging_helper import LoggingHelper, LogType

    # Get a logger instance
    logger = LoggingHelper.get_logger(LogType.MAIN)
    logger.info("Standard logging")

    # Use helper methods for common patterns
    LoggingHelper.log_error_with_trace("Operation failed", exception)
    LoggingHelper.log_user_action("Sorted contactsindex_sort", "last_name desc")
"""

import logging
import os
from enum import Enum
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


class LogType(Enum):
    """Enum for different log types in the application."""
    MAIN = "table_sort"
    USER_ACTION = "table_sort.user_actions"


class LoggingHelper:
    """
    Unified logging helper for consistent logging across the application.

    This class manages all loggers in the application and provides helper
    methods for common logging patterns.
    """

    _loggers = {}
    _initialized = False
    _log_dir: Optional[Path] = None

    @classmethod
    def initialize(cls, log_dir: Optional[str] = None):
        """
        Initialize all loggers. Should be called once at application startup.

        Args:
            log_dir: Directory where log files will be stored. Falls back to
                the SORT_LOG_DIR environment variable; when neither is set
                only console logging is configured.
        """
        if cls._initialized:
            return

        log_dir = log_dir or os.getenv('SORT_LOG_DIR')
        cls._log_dir = Path(log_dir) if log_dir else None

        cls._loggers[LogType.MAIN] = cls._setup_main_logger()
        cls._loggers[LogType.USER_ACTION] = cls._setup_user_action_logger()

        cls._initialized = True

    @classmethod
    def get_logger(cls, log_type: LogType = LogType.MAIN) -> logging.Logger:
        """
        Get a logger instance by type.

        Args:
            log_type: The type of logger to retrieve

        Returns:
            The requested logger instance
        """
        if not cls._initialized:
            cls.initialize()
        return cls._loggers.get(log_type, cls._loggers[LogType.MAIN])

    # =============================================================================
    # Helper methods for common logging patterns
    # =============================================================================

    @classmethod
    def log_error_with_trace(cls, message: str, exception: Exception,
                            log_type: LogType = LogType.MAIN):
        """
        Log an error with full traceback in a single call.

        Args:
            message: Error message to log
            exception: The exception that occurred
            log_type: Which logger to use
        """
        logger = cls.get_logger(log_type)
        logger.error(f"{message}: {exception}", exc_info=True)

    @classmethod
    def log_user_action(cls, action: str, details: Optional[str] = None):
        """
        Log user actions consistently with USER_ACTION tag.

        Args:
            action: The action performed
            details: Optional additional details
        """
        logger = cls.get_logger(LogType.USER_ACTION)
        message = action
        if details:
            message += f" - {details}"
        logger.info(message)

    # =============================================================================
    # Private logger setup methods
    # =============================================================================

    @classmethod
    def _file_handler(cls, filename: str) -> RotatingFileHandler:
        handler = RotatingFileHandler(
            cls._log_dir / filename,
            maxBytes=10*1024*1024,  # 10MB
            backupCount=3,
            encoding='utf-8'
        )
        handler.setFormatter(
            logging.Formatter('%(asctime)s | %(levelname)s | %(message)s',
                            datefmt='%Y-%m-%d %H:%M:%S')
        )
        return handler

    @classmethod
    def _setup_main_logger(cls) -> logging.Logger:
        """Configure and return the main application logger."""
        log_level = os.getenv('LOG_LEVEL', 'INFO').upper()

        logger = logging.getLogger(LogType.MAIN.value)
        logger.setLevel(getattr(logging, log_level, logging.INFO))
        logger.handlers = []
        logger.propagate = False

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter('[%(levelname)s] %(message)s'))
        logger.addHandler(console_handler)

        if cls._log_dir is None:
            return logger

        try:
            cls._log_dir.mkdir(parents=True, exist_ok=True)
            logger.addHandler(cls._file_handler('table_sort.log'))

            # Separate error file handler
            error_handler = cls._file_handler('errors.log')
            error_handler.setLevel(logging.ERROR)
            logger.addHandler(error_handler)

        except OSError as e:
            logger.warning(f"Could not create file handlers: {e}")

        return logger

    @classmethod
    def _setup_user_action_logger(cls) -> logging.Logger:
        """Configure user action logger (sort changes made by clicking headers)."""
        logger = logging.getLogger(LogType.USER_ACTION.value)
        logger.setLevel(logging.INFO)
        logger.handlers = []
        logger.propagate = False

        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter('[USER_ACTION] %(message)s'))
        logger.addHandler(handler)

        return logger


# Initialize loggers on module import
LoggingHelper.initialize()

logger = LoggingHelper.get_logger(LogType.MAIN)
