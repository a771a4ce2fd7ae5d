"""Translation of database failures into domain store errors"""

import functools
import logging
from sqlalchemy.exc import SQLAlchemyError
from src.domain.errors import StoreUnavailable

logger = logging.getLogger(__name__)


def translate_store_errors(func):
    """Raise StoreUnavailable for any database failure escaping a repository call"""

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except SQLAlchemyError as e:
            logger.error(f"Store failure in {func.__qualname__}: {e}")
            raise StoreUnavailable(f"Document store is unavailable: {e.__class__.__name__}") from e

    return wrapper
