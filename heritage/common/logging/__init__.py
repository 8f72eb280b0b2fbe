"""Logging setup for the ``heritage`` package.

Resolution and classification log at debug level with trace extras (kind,
record id, remaining depth); this module routes those records to stdout as JSON
lines carrying the active correlation id.
"""

import logging
import sys
from typing import Any

from pythonjsonlogger.json import JsonFormatter

from heritage.common.config import get_config
from heritage.common.tracing import get_correlation_id


class CorrelationIdFilter(logging.Filter):
    """Stamps each record with the correlation id of the current resolution run."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id()
        return True


class CustomJsonFormatter(JsonFormatter):
    """JSON formatter adding source location and correlation id to every line."""

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = record.created
        log_record["level"] = record.levelname
        log_record["module"] = record.module
        log_record["function"] = record.funcName
        log_record["line"] = record.lineno

        if hasattr(record, "correlation_id"):
            log_record["correlation_id"] = record.correlation_id


def setup_logging(level: str | None = None) -> None:
    """Configure structured logging for the ``heritage`` logger tree.

    Replaces any handlers already attached with one stdout handler. Lines are
    JSON unless HERITAGE_LOG_JSON is false.

    Args:
        level: Optional log level override (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               If not provided, uses HERITAGE_LOG_LEVEL from config.

    Example:
        >>> setup_logging("DEBUG")
        >>> Resolver(lookup=store.find).resolve(RecordKind.PERSON, {"_id": "p1"})
    """
    config = get_config()
    log_level = (level or config.log_level).upper()

    package_logger = logging.getLogger("heritage")
    package_logger.setLevel(log_level)

    package_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)

    if config.log_json:
        formatter: logging.Formatter = CustomJsonFormatter(
            "%(timestamp)s %(level)s %(module)s %(function)s %(message)s"
        )
    else:
        formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    console_handler.setFormatter(formatter)

    console_handler.addFilter(CorrelationIdFilter())

    package_logger.addHandler(console_handler)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, usually a module's ``__name__``."""
    return logging.getLogger(name)


__all__ = ["CorrelationIdFilter", "CustomJsonFormatter", "get_logger", "setup_logging"]
