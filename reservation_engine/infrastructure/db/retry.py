"""
Database retry utilities for handling transient failures.

Provides a helper and a decorator for automatically retrying database
operations that fail due to deadlocks, lock timeouts or serialization
failures.
"""

import asyncio
import logging
from functools import wraps
from typing import Awaitable, Callable, TypeVar

from sqlalchemy.exc import DBAPIError, OperationalError

logger = logging.getLogger(__name__)

T = TypeVar('T')

# MySQL error codes
MYSQL_DEADLOCK_ERROR = "1213"
MYSQL_LOCK_WAIT_TIMEOUT = "1205"

# PostgreSQL SQLSTATE codes
POSTGRES_SERIALIZATION_FAILURE = "40001"
POSTGRES_DEADLOCK_DETECTED = "40P01"

SQLITE_DATABASE_LOCKED = "database is locked"

TRANSIENT_MARKERS = (
    MYSQL_DEADLOCK_ERROR,
    MYSQL_LOCK_WAIT_TIMEOUT,
    POSTGRES_SERIALIZATION_FAILURE,
    POSTGRES_DEADLOCK_DETECTED,
    SQLITE_DATABASE_LOCKED,
)


def is_deadlock_error(error: Exception) -> bool:
    """
    Check if an exception is a transient locking error.

    Args:
        error: The exception to check

    Returns:
        True if the error is a deadlock or lock conflict that should be retried
    """
    if isinstance(error, (OperationalError, DBAPIError)):
        error_str = str(error)
        return any(marker in error_str for marker in TRANSIENT_MARKERS)
    return False


async def retry_on_deadlock(
    func: Callable[[], Awaitable[T]],
    max_attempts: int = 3,
    base_delay: float = 0.1,
) -> T:
    """
    Retry a function if it fails due to a database deadlock.

    Uses exponential backoff: base_delay * (2 ** attempt)

    Args:
        func: The async function to execute; it must open its own transaction
        max_attempts: Maximum number of attempts (default: 3)
        base_delay: Base delay in seconds for exponential backoff (default: 0.1)

    Returns:
        The result of the function call

    Raises:
        The original exception if max attempts exceeded or non-deadlock error

    Example:
        async def persist():
            async with transaction_manager.start():
                # ... database operations ...
                pass

        result = await retry_on_deadlock(persist)
    """
    for attempt in range(max_attempts):
        try:
            return await func()
        except Exception as e:
            if not is_deadlock_error(e):
                raise

            if attempt >= max_attempts - 1:
                logger.error(
                    "Database deadlock persists after max retries",
                    extra={
                        "attempts": max_attempts,
                        "error": str(e),
                    }
                )
                raise

            delay = base_delay * (2 ** attempt)
            logger.warning(
                "Database deadlock detected, retrying",
                extra={
                    "attempt": attempt + 1,
                    "max_attempts": max_attempts,
                    "retry_delay": delay,
                    "error": str(e),
                }
            )
            await asyncio.sleep(delay)

    raise RuntimeError("retry_on_deadlock called with max_attempts < 1")


def with_deadlock_retry(max_attempts: int = 3, base_delay: float = 0.1):
    """
    Decorator to automatically retry async functions on database deadlocks.

    Args:
        max_attempts: Maximum number of attempts (default: 3)
        base_delay: Base delay in seconds for exponential backoff (default: 0.1)

    Example:
        @with_deadlock_retry(max_attempts=3)
        async def mark_paid(session: AsyncSession, commission_id: str):
            async with session.begin():
                # ... database operations ...
                pass
    """
    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            async def execute():
                return await func(*args, **kwargs)

            return await retry_on_deadlock(execute, max_attempts, base_delay)

        return wrapper
    return decorator
