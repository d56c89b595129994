"""Translation of PostgREST failures into domain errors."""

from collections.abc import Iterator
from contextlib import contextmanager

from postgrest.exceptions import APIError

from portfolio_backend.domain.errors import DuplicateRecordError, StoreError

UNIQUE_VIOLATION = "23505"


@contextmanager
def translate_store_errors(action: str) -> Iterator[None]:
    """Re-raise PostgREST API errors as StoreError subclasses."""
    try:
        yield
    except APIError as exc:
        message = f"Failed to {action}: {exc.message}"
        if exc.code == UNIQUE_VIOLATION:
            raise DuplicateRecordError(message, code=exc.code) from exc
        raise StoreError(message, code=exc.code) from exc
