"""Utility modules."""
from .logger import get_logger, configure_logger, set_run_context
from .exceptions import (
    ProductAggregatorError,
    ConfigError,
    RetryableError,
    FetchError,
    NetworkError,
    HttpStatusError,
    ParseError,
    EmptyResultError,
    OutputWriteError
)
from .retry import retry_with_fixed_delay

__all__ = [
    "get_logger",
    "configure_logger",
    "set_run_context",
    "ProductAggregatorError",
    "ConfigError",
    "RetryableError",
    "FetchError",
    "NetworkError",
    "HttpStatusError",
    "ParseError",
    "EmptyResultError",
    "OutputWriteError",
    "retry_with_fixed_delay"
]
