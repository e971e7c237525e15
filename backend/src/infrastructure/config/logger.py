"""Logging setup for the catalog service and the ASGI server it runs under."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO


APP_LOGGER_NAME = "product_catalog"

# Server loggers that should share the application's handler and format
SERVER_LOGGER_NAMES = ("uvicorn", "uvicorn.error", "uvicorn.access")


class JSONFormatter(logging.Formatter):
    """One JSON object per line, tagged with the service name."""

    def __init__(self, service: str = APP_LOGGER_NAME):
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "service": self.service,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}:{record.funcName}:{record.lineno}",
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Single-line text output; level names are colored on terminals only."""

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, use_colors: bool = False):
        super().__init__(datefmt="%Y-%m-%d %H:%M:%S")
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        level = f"{record.levelname:8s}"
        if self.use_colors:
            level = f"{self.LEVEL_COLORS.get(record.levelno, '')}{level}{self.RESET}"

        line = f"[{self.formatTime(record, self.datefmt)}] {level} - {record.name} - {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def _build_formatter(log_format: str, stream: TextIO, service: str) -> logging.Formatter:
    if log_format.lower() == "json":
        return JSONFormatter(service=service)
    return TextFormatter(use_colors=stream.isatty())


def setup_logger(
    name: str = APP_LOGGER_NAME,
    level: str = "INFO",
    log_format: str = "text",
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configure the application logger and attach uvicorn's loggers to it.

    Calling it again replaces the previous handler, so tests and reloads
    never stack duplicate output.

    Args:
        name: Application logger name
        level: Log level name, case insensitive
        log_format: ``json`` or ``text``
        stream: Output stream, stdout by default

    Returns:
        The configured application logger
    """
    stream = stream or sys.stdout
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    handler = logging.StreamHandler(stream)
    handler.setFormatter(_build_formatter(log_format, stream, service=name))

    for logger_name in (name, *SERVER_LOGGER_NAMES):
        target = logging.getLogger(logger_name)
        target.handlers.clear()
        target.setLevel(numeric_level)
        # uvicorn.error and uvicorn.access log through their parent
        target.propagate = logger_name not in (name, "uvicorn")

    logger = logging.getLogger(name)
    logger.addHandler(handler)
    logging.getLogger("uvicorn").addHandler(handler)

    return logger


def get_logger(name: str = APP_LOGGER_NAME) -> logging.Logger:
    """Return a logger nested under the application logger."""
    if name == APP_LOGGER_NAME or name.startswith(f"{APP_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{APP_LOGGER_NAME}.{name}")
