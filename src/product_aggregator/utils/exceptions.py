"""Custom exception classes for Product Aggregator."""


class ProductAggregatorError(Exception):
    """Base exception for Product Aggregator."""
    pass


class ConfigError(ProductAggregatorError):
    """Configuration-related errors."""
    pass


# Retryable errors
class RetryableError(ProductAggregatorError):
    """Base class for errors that should trigger retry."""
    pass


class FetchError(RetryableError):
    """Catalog fetch failed for one attempt."""
    pass


class NetworkError(FetchError):
    """Connection or transport failure during the request."""
    pass


class HttpStatusError(FetchError):
    """API answered with a non-success status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code


class ParseError(FetchError):
    """Response body is not a valid product list."""
    pass


class EmptyResultError(FetchError):
    """Response parsed but contained no products."""
    pass


class OutputWriteError(ProductAggregatorError, OSError):
    """Grouped catalog could not be written to disk."""
    pass
