from typing import Optional, Type, TypeVar

from app.core.exceptions import NotFoundError, UnauthorizedError

T = TypeVar("T")


def ensure_owner(record: Optional[T], user_id: int, not_found: Type[NotFoundError] = NotFoundError) -> T:
    """
    Return ``record`` when ``user_id`` owns it.

    A missing record raises ``not_found``; a record owned by someone else
    raises ``UnauthorizedError`` without exposing any of its fields.
    """
    if record is None:
        raise not_found()
    if record.user_id != user_id:
        raise UnauthorizedError()
    return record
