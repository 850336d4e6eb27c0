"""Conversion of infrastructure failures into client-facing errors."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from trackmaster.domain.exceptions import InternalError, PersistenceError

logger = logging.getLogger(__name__)


@contextmanager
def persistence_failures(message: str) -> Iterator[None]:
    """Re-raise any ``PersistenceError`` in the block as ``InternalError(message)``.

    Usage:
        with persistence_failures("Fetching domains failed, please try again later."):
            domains = await self._repository.get_all()
    """
    try:
        yield
    except PersistenceError as exc:
        logger.error("%s (%s)", message, exc)
        raise InternalError(message) from exc
