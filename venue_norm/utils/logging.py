"""
Logging configuration for venue-norm.

Console logging by default, optional rotating file output and a JSON
formatter for log aggregation.
"""
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional
from datetime import datetime, timezone
import json


class UtcMillisecondFormatter(logging.Formatter):
    """
    Formatter with UTC millisecond timestamps.
    Matches the resolution of venue timestamps in unified records.
    """

    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:
        ct = datetime.fromtimestamp(record.created, tz=timezone.utc)
        millis = int((record.created % 1) * 1000)

        if datefmt:
            s = ct.strftime(datefmt)
        else:
            s = ct.strftime("%Y-%m-%d %H:%M:%S")

        return f"{s}.{millis:03d}Z"


class JsonFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.
    Useful for log aggregation systems like ELK stack.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "timestamp_ms": int(record.created * 1000),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


def setup_logging(
    level: str = "INFO",
    log_format: Optional[str] = None,
    date_format: Optional[str] = None,
    file_path: Optional[str] = None,
    max_file_size_mb: int = 20,
    backup_count: int = 3,
    json_format: bool = False
) -> logging.Logger:
    """
    Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Custom log format string
        date_format: Custom date format string
        file_path: Path to log file (None for console only)
        max_file_size_mb: Max size of each log file before rotation
        backup_count: Number of backup files to keep
        json_format: Use JSON formatting for structured logs

    Returns:
        Root logger instance
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    root_logger.handlers.clear()

    if json_format:
        formatter = JsonFormatter()
    else:
        if not log_format:
            log_format = "%(asctime)s | %(levelname)-8s | %(name)-28s | %(message)s"
        formatter = UtcMillisecondFormatter(fmt=log_format, datefmt=date_format)

    # Console handler (stderr; stdout carries CLI output)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if file_path:
        log_path = Path(file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_path,
            maxBytes=max_file_size_mb * 1024 * 1024,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Suppress noisy loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a named logger."""
    return logging.getLogger(name)
