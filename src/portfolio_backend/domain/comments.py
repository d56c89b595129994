"""Domain models for visitor comments."""

from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CommentInput(BaseModel):
    """Comment submitted by a visitor."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: str
    last_name: str
    email: str = Field(min_length=3)
    comment: str


@dataclass(frozen=True)
class CommentRecord:
    """Stored comment, one per email address."""

    id: int
    first_name: str
    last_name: str
    email: str
    comment: str
    updated_at: datetime


@dataclass(frozen=True)
class CommentResult:
    """Outcome of a comment submission.

    ``created`` is true for a fresh insert and false when an earlier comment
    from the same email was overwritten.
    """

    success: bool
    created: bool = False
    error_message: str | None = None

    def to_dict(self) -> dict[str, object]:
        """Serialize the outcome using the public wire names."""
        if not self.success:
            return {"success": False, "errorMessage": self.error_message}
        return {"success": True, "created": self.created}
