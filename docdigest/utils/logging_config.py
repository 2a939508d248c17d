"""
Logging configuration for docdigest.

This module provides centralized logging configuration with consistent
formatting across all modules and an optional JSON output format.
"""

import copy
import json
import logging
import logging.config
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

# Attributes present on every LogRecord; anything else was passed via ``extra``
_RECORD_ATTRIBUTES = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None)).keys()
) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """Format log records as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        """Format record as JSON."""
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRIBUTES:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class DigestLogger:
    """Centralized logger configuration for docdigest."""

    DEFAULT_CONFIG: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "detailed": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "simple": {"format": "%(levelname)s - %(name)s - %(message)s"},
            "json": {"()": "docdigest.utils.logging_config.JSONFormatter"},
        },
        "handlers": {
            # stdout is reserved for command output
            "console": {
                "class": "logging.StreamHandler",
                "level": "DEBUG",
                "formatter": "simple",
                "stream": "ext://sys.stderr",
            },
            "file": {
                "class": "logging.handlers.RotatingFileHandler",
                "level": "DEBUG",
                "formatter": "detailed",
                "filename": "logs/docdigest.log",
                "maxBytes": 10 * 1024 * 1024,  # 10MB
                "backupCount": 5,
            },
        },
        "loggers": {
            "docdigest": {"level": "INFO", "handlers": ["console"], "propagate": True},
        },
    }

    _configured = False

    @classmethod
    def configure(
        cls,
        level: str = "INFO",
        log_file: Optional[str] = None,
        json_format: bool = False,
        force: bool = False,
    ) -> None:
        """
        Configure logging for docdigest.

        Args:
            level: Level of the ``docdigest`` logger (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_file: Path to log file (if None, only console logging)
            json_format: Whether to use JSON format for logs
            force: Reconfigure even if logging was already configured
        """
        if cls._configured and not force:
            return

        config = copy.deepcopy(cls.DEFAULT_CONFIG)
        config["loggers"]["docdigest"]["level"] = level.upper()

        if log_file:
            config["handlers"]["file"]["filename"] = log_file
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            config["loggers"]["docdigest"]["handlers"].append("file")
        else:
            del config["handlers"]["file"]

        if json_format:
            for handler_config in config["handlers"].values():
                handler_config["formatter"] = "json"

        logging.config.dictConfig(config)
        cls._configured = True

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """
        Get a configured logger for the given name.

        Args:
            name: Logger name (typically __name__)

        Returns:
            Configured logger instance
        """
        if not cls._configured:
            cls.configure()

        return logging.getLogger(name)


def get_logger(name: str) -> logging.Logger:
    """Convenience function to get a configured logger."""
    return DigestLogger.get_logger(name)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False,
) -> None:
    """
    Setup logging configuration.

    Args:
        level: Logging level for docdigest modules
        log_file: Path to log file
        json_format: Whether to use JSON format
    """
    DigestLogger.configure(level=level, log_file=log_file, json_format=json_format, force=True)
