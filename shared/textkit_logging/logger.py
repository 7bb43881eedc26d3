"""
TextkitLogger - Structured logging for textkit components.

Wraps a stdlib logger so that keyword arguments passed to log calls become
structured fields, rendered by the console or JSON formatter.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from .formatters import ConsoleFormatter, JsonFormatter


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    # logging also exposes non-level names such as BASIC_FORMAT
    value = getattr(logging, level.upper(), None)
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


class TextkitLogger:
    """Structured logger for textkit components.

    Usage:
        from textkit_logging import get_logger

        logger = get_logger("textkit", component="chunking")
        logger.debug("Non-string input", input_type="int")
    """

    def __init__(
        self,
        name: str,
        level: int | str = logging.INFO,
        component: str | None = None,
    ):
        """Initialize the logger.

        Args:
            name: Logger name (typically "textkit" or "textkit.<module>")
            level: Log level (default INFO)
            component: Optional component within the service
        """
        self.name = name
        self.component = component
        self._logger = logging.getLogger(name)
        self._logger.setLevel(_resolve_level(level))
        self._logger.propagate = False

        self._json = os.environ.get("TEXTKIT_LOG_JSON") == "1"

    def _ensure_handlers(self) -> None:
        """Ensure handlers are configured (lazy initialization)."""
        if self._logger.handlers:
            return
        self._add_console_handler()

    def _add_console_handler(self) -> None:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG)

        if self._json:
            console_handler.setFormatter(JsonFormatter(service=self.name, component=self.component))
        else:
            console_handler.setFormatter(ConsoleFormatter(service=self.name, use_colors=None))

        self._logger.addHandler(console_handler)

    def set_level(self, level: int | str) -> None:
        """Change the log level after creation."""
        self._logger.setLevel(_resolve_level(level))

    def use_json(self, enabled: bool = True) -> None:
        """Switch console output between JSON and human-readable format.

        Existing console handlers are replaced; file handlers are kept.
        """
        self._json = enabled
        for handler in self._logger.handlers[:]:
            if not isinstance(handler, RotatingFileHandler):
                self._logger.removeHandler(handler)
        self._add_console_handler()

    def _log(
        self,
        level: int,
        msg: str,
        *args: Any,
        exc_info: Any = None,
        **kwargs: Any,
    ) -> None:
        """Internal logging method."""
        if not self._logger.isEnabledFor(level):
            return

        self._ensure_handlers()
        self._logger.log(level, msg, *args, exc_info=exc_info, extra=kwargs or None)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log a debug message."""
        self._log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log an info message."""
        self._log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log a warning message."""
        self._log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: str, *args: Any, exc_info: Any = None, **kwargs: Any) -> None:
        """Log an error message."""
        self._log(logging.ERROR, msg, *args, exc_info=exc_info, **kwargs)

    def exception(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log an exception (includes stack trace)."""
        self._log(logging.ERROR, msg, *args, exc_info=True, **kwargs)

    def add_file_handler(
        self,
        log_file: str | Path,
        level: int = logging.DEBUG,
        max_bytes: int = 10 * 1024 * 1024,  # 10 MB
        backup_count: int = 5,
    ) -> None:
        """Add a file handler with JSON formatting.

        Args:
            log_file: Path to the log file
            level: Log level for file handler
            max_bytes: Max file size before rotation
            backup_count: Number of backup files to keep
        """
        log_file = Path(log_file)
        for handler in self._logger.handlers:
            if isinstance(handler, RotatingFileHandler) and handler.baseFilename == os.path.abspath(log_file):
                return
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(JsonFormatter(service=self.name, component=self.component))

        self._logger.addHandler(file_handler)

    def with_context(self, **kwargs: Any) -> "BoundLogger":
        """Create a bound logger with additional fields.

        Usage:
            bound = logger.with_context(command="chunk")
            bound.info("Done")  # Includes command in all logs
        """
        return BoundLogger(self, kwargs)


class BoundLogger:
    """Logger bound to specific fields.

    All log calls from a BoundLogger include the bound fields.
    """

    def __init__(self, parent: TextkitLogger, bound_fields: dict[str, Any]):
        self._parent = parent
        self._bound_fields = bound_fields

    def _merge_kwargs(self, kwargs: dict[str, Any]) -> dict[str, Any]:
        result = dict(self._bound_fields)
        result.update(kwargs)
        return result

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._parent.debug(msg, *args, **self._merge_kwargs(kwargs))

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._parent.info(msg, *args, **self._merge_kwargs(kwargs))

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._parent.warning(msg, *args, **self._merge_kwargs(kwargs))

    def error(self, msg: str, *args: Any, exc_info: Any = None, **kwargs: Any) -> None:
        self._parent.error(msg, *args, exc_info=exc_info, **self._merge_kwargs(kwargs))

    def exception(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._parent.exception(msg, *args, **self._merge_kwargs(kwargs))

    def with_context(self, **kwargs: Any) -> "BoundLogger":
        """Create a new bound logger with additional fields."""
        return BoundLogger(self._parent, self._merge_kwargs(kwargs))


# Logger registry for singleton behavior
_loggers: dict[str, TextkitLogger] = {}


def get_logger(
    name: str,
    level: int | str = logging.INFO,
    component: str | None = None,
) -> TextkitLogger:
    """Get or create a logger by name.

    Loggers are cached by name and component, so repeated calls return the
    same instance. ``level`` only applies when the logger is first created.

    Args:
        name: Logger name
        level: Log level (default INFO)
        component: Optional component within the service

    Returns:
        TextkitLogger instance
    """
    key = f"{name}:{component or ''}"

    if key not in _loggers:
        _loggers[key] = TextkitLogger(name, level, component)

    return _loggers[key]


def configure_logging(
    level: int | str = logging.WARNING,
    json_format: bool = False,
    log_file: str | Path | None = None,
) -> None:
    """Apply a level and output format to every textkit logger.

    Loggers created later through get_logger() keep their own level, so call
    this after the modules that own the loggers have been imported.

    Args:
        level: Log level for all registered loggers
        json_format: Whether console output should be JSON
        log_file: Optional path for a rotating JSON log file
    """
    for logger in _loggers.values():
        logger.set_level(level)
        logger.use_json(json_format)
        if log_file is not None:
            logger.add_file_handler(log_file)
