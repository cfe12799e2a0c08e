"""
Shared store plumbing
"""
import logging
from functools import wraps

from sqlalchemy.exc import SQLAlchemyError

from hanuram.exceptions import FatalError

logger = logging.getLogger(__name__)


def persistence_guard(func):
    """
    Turn driver / ORM failures into `FatalError` so handlers answer with an opaque 500
    """
    @wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except SQLAlchemyError as exc:
            logger.error("Persistence failure in %s: %s", func.__qualname__, type(exc).__name__, exc_info=True)
            raise FatalError() from exc
    return wrapper
