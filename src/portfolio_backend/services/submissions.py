"""Record-processing pipeline shared by every submit endpoint."""

import logging
from typing import Protocol

from portfolio_backend.domain.submissions import (
    ErrorDetail,
    InvalidBody,
    SingleRecord,
    classify_body,
)

logger = logging.getLogger(__name__)


class RecordHandler(Protocol):
    """Resource-specific insert and listing operations."""

    def insert_one(self, record: object) -> object | None:
        """Persist one record, returning None on success or an error value."""

    def list_all(self) -> object:
        """Return the current listing of the resource."""


def process_submission(
    body: object, handler: RecordHandler, invalid_body_message: str
) -> object:
    """Insert one record or a batch of records and report the outcome.

    Items are inserted one at a time in the order given. A failing item does
    not stop the rest of the batch and nothing already inserted is rolled
    back. When every item succeeds the handler's listing is returned;
    otherwise the result names how many items failed and pairs each failing
    record with its error. Errors raised by ``list_all`` propagate.
    """
    submission = classify_body(body)
    if isinstance(submission, InvalidBody):
        return {"errorMessage": invalid_body_message, "requestBody": body}

    if isinstance(submission, SingleRecord):
        records: list[object] = [submission.record]
    else:
        records = submission.records

    errors: list[dict[str, object]] = []
    for record in records:
        error = _insert(handler, record)
        if error is not None:
            errors.append({"originalBody": record, "error": error})

    if errors:
        logger.info(
            "Submission finished with failures",
            extra={"failed": len(errors), "total": len(records)},
        )
        return {
            "errorMessage": (
                f"{len(errors)} out of {len(records)} record(s) "
                "failed upon submission!"
            ),
            "errors": errors,
        }
    return handler.list_all()


def _insert(handler: RecordHandler, record: object) -> object | None:
    """Run one insert, converting unexpected exceptions into an error value."""
    try:
        return handler.insert_one(record)
    except Exception as exc:
        logger.exception("Unexpected failure while inserting a record")
        return ErrorDetail(error_message=f"{type(exc).__name__}: {exc}")
