# ABOUTME: Logging configuration and structured logging helpers
# ABOUTME: Provides loguru sinks and structlog loggers for the scrape pipeline

from .config import LoggingMode, configure_logging, detect_logging_mode, get_logging_status
from .utils import LogContext, get_logger, log_api_call, log_pipeline_step, with_pipeline_context

__all__ = [
    # Configuration
    "LoggingMode",
    "configure_logging",
    "detect_logging_mode",
    "get_logging_status",
    # Utilities
    "LogContext",
    "get_logger",
    "log_api_call",
    "log_pipeline_step",
    "with_pipeline_context",
]
