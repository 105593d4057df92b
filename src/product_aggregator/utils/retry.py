"""Retry decorator with a fixed delay between attempts."""
import time
import functools
from typing import Callable, Type, Tuple
from .exceptions import RetryableError
from .logger import get_logger

logger = get_logger()


def retry_with_fixed_delay(
    max_attempts: int = 3,
    delay_seconds: float = 2.0,
    retryable_exceptions: Tuple[Type[Exception], ...] = (RetryableError,)
):
    """
    Decorator for retrying functions with a constant pause between attempts.
    
    Args:
        max_attempts: Total number of attempts, including the first one
        delay_seconds: Seconds to wait after each failed attempt except the last
        retryable_exceptions: Tuple of exception types that trigger retry
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    def decorator(func: Callable):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            for attempt in range(1, max_attempts + 1):
                try:
                    return func(*args, **kwargs)
                except retryable_exceptions as e:
                    logger.error(f"Error in {func.__name__} (attempt {attempt}/{max_attempts}): {e}")
                    if attempt == max_attempts:
                        logger.error(f"Max attempts ({max_attempts}) exceeded for {func.__name__}")
                        raise
                    
                    logger.debug(f"Waiting {delay_seconds:.1f}s before retrying {func.__name__}")
                    time.sleep(delay_seconds)
        
        return wrapper
    return decorator
