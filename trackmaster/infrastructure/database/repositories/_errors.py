"""Helpers shared by the SQLAlchemy repositories."""

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError

from trackmaster.domain.exceptions import PersistenceError


@contextmanager
def database_errors(operation: str) -> Iterator[None]:
    """Re-raise any SQLAlchemy failure in the block as a domain ``PersistenceError``."""
    try:
        yield
    except SQLAlchemyError as exc:
        raise PersistenceError(operation, exc) from exc


def as_utc(value: datetime) -> datetime:
    """SQLite drops tzinfo on read; stored timestamps are always UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
