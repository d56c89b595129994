"""Visitor comment submissions, one comment per email address."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from portfolio_backend.domain.comments import CommentInput, CommentRecord, CommentResult
from portfolio_backend.domain.errors import DuplicateRecordError, StoreError

logger = logging.getLogger(__name__)


class CommentRepository(Protocol):
    """Persistence interface for comments."""

    def get_by_email(self, email: str) -> CommentRecord | None:
        """Return the comment left by ``email``, if present."""

    def create_comment(self, payload: CommentInput, updated_at: datetime) -> None:
        """Insert a new comment row."""

    def update_comment(
        self, comment_id: int, comment: str, updated_at: datetime
    ) -> None:
        """Overwrite the text and timestamp of an existing comment."""

    def list_comments(self) -> list[CommentRecord]:
        """Return all comments, newest first."""


@dataclass
class CommentService:
    """Application service for visitor comments."""

    repository: CommentRepository

    def submit(self, payload: CommentInput) -> CommentResult:
        """Insert the comment, or overwrite the one already left by this email.

        Only the comment text and timestamp are overwritten; the names keep
        their first submitted values.
        """
        now = datetime.now(tz=UTC)
        try:
            existing = self.repository.get_by_email(payload.email)
            if existing is None:
                existing = self._create(payload, updated_at=now)
                if existing is None:
                    return CommentResult(success=True, created=True)
            self.repository.update_comment(
                existing.id, payload.comment, updated_at=now
            )
        except StoreError as exc:
            logger.warning("Failed to store comment", extra={"code": exc.code})
            return CommentResult(success=False, error_message=str(exc))
        return CommentResult(success=True, created=False)

    def _create(
        self, payload: CommentInput, updated_at: datetime
    ) -> CommentRecord | None:
        """Insert the comment, returning the winning row if the email raced in."""
        try:
            self.repository.create_comment(payload, updated_at=updated_at)
        except DuplicateRecordError:
            winner = self.repository.get_by_email(payload.email)
            if winner is None:
                raise
            logger.info(
                "Comment created concurrently, updating it",
                extra={"comment_id": winner.id},
            )
            return winner
        return None

    def list_all(self) -> list[dict[str, object]]:
        """Return comments in their public shape, without email addresses."""
        return [
            {
                "firstName": comment.first_name,
                "lastName": comment.last_name,
                "comment": comment.comment,
                "updatedAt": comment.updated_at.isoformat(),
            }
            for comment in self.repository.list_comments()
        ]
