"""Translation of database errors into edge store errors."""

from collections.abc import Iterator
from contextlib import contextmanager

from django.db import DatabaseError, IntegrityError

import structlog

from core.exceptions import StoreUnavailableError

logger = structlog.get_logger(__name__)


@contextmanager
def translate_database_errors(operation: str) -> Iterator[None]:
    """Re-raise database failures as :class:`StoreUnavailableError`.

    Integrity errors pass through untouched so callers can map them to
    constraint violations.

    Args:
        operation: Store operation name recorded on the error and in logs
    """
    try:
        yield
    except IntegrityError:
        raise
    except DatabaseError as e:
        logger.error(
            "Store operation failed",
            operation=operation,
            error=str(e),
            error_type=type(e).__name__,
        )
        raise StoreUnavailableError(operation=operation) from e
