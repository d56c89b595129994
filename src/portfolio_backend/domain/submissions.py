"""Domain models for record submissions and their outcomes."""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from portfolio_backend.domain.errors import StoreError


class ErrorDetail(BaseModel):
    """Failure reported for a single submitted record."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    error_message: str = Field(alias="errorMessage")
    error_argument: Any = Field(default=None, alias="errorArgument")

    @classmethod
    def from_validation(cls, exc: ValidationError) -> "ErrorDetail":
        """Describe the fields that failed validation."""
        fields = sorted(
            {".".join(str(part) for part in error["loc"]) for error in exc.errors()}
        )
        return cls(
            error_message="Record is missing or has invalid fields!",
            error_argument=fields,
        )

    @classmethod
    def from_store_error(cls, exc: StoreError) -> "ErrorDetail":
        """Describe a store-level failure."""
        return cls(error_message=str(exc), error_argument=exc.code)


@dataclass(frozen=True)
class SingleRecord:
    """A request body holding one keyed record."""

    record: dict[str, object]


@dataclass(frozen=True)
class RecordBatch:
    """A request body holding an ordered sequence of records."""

    records: list[object]


@dataclass(frozen=True)
class InvalidBody:
    """A request body that is neither a record nor a sequence of records."""

    body: object


Submission = SingleRecord | RecordBatch | InvalidBody


def classify_body(body: object) -> Submission:
    """Classify a decoded request body.

    Any list is a batch, including the empty list, which simply inserts
    nothing. Only a non-empty mapping is a single record.
    """
    if isinstance(body, list):
        return RecordBatch(records=body)
    if isinstance(body, dict) and body:
        return SingleRecord(record=body)
    return InvalidBody(body=body)
