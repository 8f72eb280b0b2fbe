"""Common utilities for the heritage data model.

This package provides the ambient stack shared by every other sub-package:
configuration, JSON logging and correlation tracing.
"""

from heritage.common.config import HeritageConfig, get_config
from heritage.common.logging import get_logger, setup_logging
from heritage.common.tracing import TracingContext, get_correlation_id

__all__ = [
    "HeritageConfig",
    "TracingContext",
    "get_config",
    "get_correlation_id",
    "get_logger",
    "setup_logging",
]
