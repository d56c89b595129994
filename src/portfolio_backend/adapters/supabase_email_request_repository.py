"""Supabase-backed email request ledger."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from portfolio_backend.adapters.supabase_errors import translate_store_errors
from portfolio_backend.domain.contact import EmailRequest
from portfolio_backend.services.contact import EmailRequestRepository


@dataclass
class SupabaseEmailRequestRepository(EmailRequestRepository):
    """Supabase implementation for the email request ledger."""

    client: Client

    def create_request(self, email: str, created_at: datetime) -> None:
        """Append a ledger row."""
        with translate_store_errors("record email request"):
            self.client.table("email_requests").insert(
                {"email": email, "created_at": created_at.isoformat()}
            ).execute()

    def has_request_since(self, since: datetime) -> bool:
        """Return True when a row was created at or after ``since``."""
        with translate_store_errors("check recent email requests"):
            response = (
                self.client.table("email_requests")
                .select("id")
                .gte("created_at", since.isoformat())
                .limit(1)
                .execute()
            )
        return bool(response.data)

    def list_recent(self, limit: int) -> list[EmailRequest]:
        """Return the newest ledger rows."""
        with translate_store_errors("list email requests"):
            response = (
                self.client.table("email_requests")
                .select("id, email, created_at")
                .order("created_at", desc=True)
                .limit(limit)
                .execute()
            )
        return [
            EmailRequest(
                id=int(row["id"]),
                email=str(row.get("email", "")),
                created_at=datetime.fromisoformat(str(row["created_at"])),
            )
            for row in response.data or []
        ]

    def clear(self) -> int:
        """Delete every ledger row."""
        # PostgREST refuses unfiltered deletes; ids are always positive.
        with translate_store_errors("clear email requests"):
            response = (
                self.client.table("email_requests").delete().gte("id", 0).execute()
            )
        return len(response.data or [])
