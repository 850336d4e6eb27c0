"""Range of ids the storage layer can hold."""

from trackmaster.domain.exceptions import NotFoundError

# primary keys are 32-bit integer columns
MAX_STORED_ID = 2**31 - 1


def ensure_stored_id(entity_type: str, entity_id: int) -> None:
    """Raise NotFoundError for an id no row can have, without querying storage."""
    if not 1 <= entity_id <= MAX_STORED_ID:
        raise NotFoundError(entity_type, entity_id)
