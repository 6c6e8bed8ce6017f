"""
Logging configuration for the newsroom markup engine.

The engine modules only obtain loggers with ``logging.getLogger(__name__)``;
handlers are installed by whoever embeds the engine. This module provides
the setup used by the CLI: rich console output by default, with plain,
detailed and JSON formats available for log collectors.
"""

import json
import logging
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "newsroom_markup"


class LogLevel(Enum):
    """Levels accepted by ``logging.level`` and ``--verbose``."""
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    @classmethod
    def from_name(cls, name: Union[str, "LogLevel"]) -> "LogLevel":
        """Accept ``"debug"``, ``"DEBUG"`` or a member; anything else is a ValueError."""
        if isinstance(name, LogLevel):
            return name
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown log level: {name}") from None


class LogFormat(Enum):
    """Values of ``logging.format``."""
    RICH = "rich"
    STANDARD = "standard"
    DETAILED = "detailed"
    JSON = "json"


# Anything on a record beyond these arrived through ``extra``.
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime", "extra_data"}


class JSONFormatter(logging.Formatter):
    """One JSON object per line, with ``extra`` fields merged in at the top level."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}:{record.funcName}:{record.lineno}",
        }
        payload.update(getattr(record, "extra_data", None) or {})
        payload.update(
            (key, value) for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, ensure_ascii=False)


def create_formatter(log_format: LogFormat) -> logging.Formatter:
    """Create the formatter for a non-rich log format."""
    if log_format is LogFormat.JSON:
        return JSONFormatter()
    if log_format is LogFormat.DETAILED:
        return logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(funcName)s:%(lineno)d - %(message)s'
        )
    return logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')


def setup_logging(
    level: Union[str, LogLevel] = LogLevel.INFO,
    log_format: Union[str, LogFormat] = LogFormat.RICH,
    console: Optional[Console] = None,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Configure the root logger.

    Args:
        level: Minimum level to emit
        log_format: Console format; ``rich`` uses a RichHandler
        console: Rich console to log to (a stderr console by default)
        log_file: Optional file receiving JSON records

    Returns:
        The package logger
    """
    log_level = LogLevel.from_name(level)
    log_format = LogFormat(log_format)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(log_level.value)

    if log_format is LogFormat.RICH:
        handler: logging.Handler = RichHandler(
            console=console or Console(stderr=True),
            show_time=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(create_formatter(log_format))

    handler.setLevel(log_level.value)
    root_logger.addHandler(handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(log_level.value)
        file_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(file_handler)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(log_level.value)
    return logger
