"""Supabase-backed comment repository."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from portfolio_backend.adapters.supabase_errors import translate_store_errors
from portfolio_backend.domain.comments import CommentInput, CommentRecord
from portfolio_backend.services.comments import CommentRepository


@dataclass
class SupabaseCommentRepository(CommentRepository):
    """Supabase implementation for visitor comments."""

    client: Client

    def get_by_email(self, email: str) -> CommentRecord | None:
        """Return the comment left by an email address, if present."""
        with translate_store_errors("look up comment"):
            response = (
                self.client.table("comments")
                .select("*")
                .eq("email", email)
                .limit(1)
                .execute()
            )
        if not response.data:
            return None
        return _parse_comment(response.data[0])

    def create_comment(self, payload: CommentInput, updated_at: datetime) -> None:
        """Insert a new comment row."""
        with translate_store_errors("create comment"):
            self.client.table("comments").insert(
                {
                    "first_name": payload.first_name,
                    "last_name": payload.last_name,
                    "email": payload.email,
                    "comment": payload.comment,
                    "updated_at": updated_at.isoformat(),
                }
            ).execute()

    def update_comment(
        self, comment_id: int, comment: str, updated_at: datetime
    ) -> None:
        """Overwrite the comment text and timestamp."""
        with translate_store_errors("update comment"):
            self.client.table("comments").update(
                {"comment": comment, "updated_at": updated_at.isoformat()}
            ).eq("id", comment_id).execute()

    def list_comments(self) -> list[CommentRecord]:
        """Return comments ordered by most recent update."""
        with translate_store_errors("list comments"):
            response = (
                self.client.table("comments")
                .select("*")
                .order("updated_at", desc=True)
                .execute()
            )
        return [_parse_comment(row) for row in response.data or []]


def _parse_comment(row: dict[str, object]) -> CommentRecord:
    """Parse a comment row into a domain model."""
    return CommentRecord(
        id=int(row["id"]),
        first_name=str(row.get("first_name", "")),
        last_name=str(row.get("last_name", "")),
        email=str(row.get("email", "")),
        comment=str(row.get("comment", "")),
        updated_at=datetime.fromisoformat(str(row["updated_at"])),
    )
