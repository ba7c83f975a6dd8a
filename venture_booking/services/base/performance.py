"""
Operation timing for service methods.
"""

from datetime import datetime
from functools import wraps

from venture_booking.core.exceptions import BaseAppException
from venture_booking.core.logging import get_logger

logger = get_logger(__name__)


def track_performance(operation_name: str):
    """Decorator to track operation performance."""
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            start_time = datetime.now()
            try:
                result = func(*args, **kwargs)
            except BaseAppException as e:
                duration = (datetime.now() - start_time).total_seconds()
                logger.warning(
                    f"Operation '{operation_name}' rejected after {duration:.3f}s: {e.message}",
                    extra={
                        "operation": operation_name,
                        "duration_seconds": duration,
                        "error_code": e.error_code.value,
                    },
                )
                raise
            except Exception as e:
                duration = (datetime.now() - start_time).total_seconds()
                logger.error(
                    f"Operation '{operation_name}' failed after {duration:.3f}s: {str(e)}",
                    extra={
                        "operation": operation_name,
                        "duration_seconds": duration,
                        "error": str(e),
                    },
                    exc_info=True,
                )
                raise

            duration = (datetime.now() - start_time).total_seconds()
            logger.debug(
                f"Operation '{operation_name}' completed in {duration:.3f}s",
                extra={"operation": operation_name, "duration_seconds": duration},
            )
            return result
        return wrapper
    return decorator
