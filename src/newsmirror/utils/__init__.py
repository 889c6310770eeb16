# ABOUTME: Shared utilities for logging and console output
# ABOUTME: Re-exports the logging helpers used across the package

from .logging import LoggingMode, configure_logging, get_logger, get_logging_status

__all__ = [
    "LoggingMode",
    "configure_logging",
    "get_logger",
    "get_logging_status",
]
