"""Supabase-backed activity repository."""

from dataclasses import dataclass

from supabase import Client

from portfolio_backend.adapters.supabase_errors import translate_store_errors
from portfolio_backend.domain.records import Activity, ActivityInput
from portfolio_backend.services.activities import ActivityRepository


@dataclass
class SupabaseActivityRepository(ActivityRepository):
    """Supabase implementation for activities."""

    client: Client

    def create_activity(self, payload: ActivityInput) -> None:
        """Insert an activity row."""
        with translate_store_errors("create activity"):
            self.client.table("activities").insert(
                {"title": payload.title, "description": payload.description}
            ).execute()

    def list_activities(self) -> list[Activity]:
        """Return activities in insertion order."""
        with translate_store_errors("list activities"):
            response = (
                self.client.table("activities")
                .select("id, title, description")
                .order("id")
                .execute()
            )
        return [
            Activity(
                id=int(row["id"]),
                title=str(row.get("title", "")),
                description=row.get("description"),
            )
            for row in response.data or []
        ]
