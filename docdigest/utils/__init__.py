"""Utility modules for docdigest."""

from .config import ConfigManager, load_config, merge_with_env_vars, validate_config
from .error_handling import ErrorContext, handle_errors
from .logging_config import JSONFormatter, get_logger, setup_logging
from .schema import DigestConfig, LoggingConfig, SummarizerConfig

__all__ = [
    "ConfigManager",
    "DigestConfig",
    "ErrorContext",
    "JSONFormatter",
    "LoggingConfig",
    "SummarizerConfig",
    "get_logger",
    "handle_errors",
    "load_config",
    "merge_with_env_vars",
    "setup_logging",
    "validate_config",
]
