"""
textkit_logging - Structured logging library for textkit.

Usage:
    from textkit_logging import get_logger

    logger = get_logger("textkit", component="chunking")

    # Keyword arguments become structured fields
    logger.debug("Non-string input", input_type="int")

    # Bound logger (all logs include bound fields)
    bound = logger.with_context(command="chunk")
    bound.info("Chunked input", chunks=3)

Features:
    - Human-readable console output (default)
    - Structured JSON output (TEXTKIT_LOG_JSON=1)
    - File handler with rotation support
"""

from .formatters import ConsoleFormatter, JsonFormatter
from .logger import BoundLogger, TextkitLogger, configure_logging, get_logger


__all__ = [
    "BoundLogger",
    "ConsoleFormatter",
    "JsonFormatter",
    "TextkitLogger",
    "configure_logging",
    "get_logger",
]

__version__ = "0.1.0"
