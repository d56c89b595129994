"""Supabase-backed hobby repository."""

from dataclasses import dataclass

from supabase import Client

from portfolio_backend.adapters.supabase_errors import translate_store_errors
from portfolio_backend.adapters.supabase_image_repository import (
    IMAGE_EMBED,
    parse_image,
)
from portfolio_backend.domain.records import Hobby, HobbyInput
from portfolio_backend.services.hobbies import HobbyRepository


@dataclass
class SupabaseHobbyRepository(HobbyRepository):
    """Supabase implementation for hobbies."""

    client: Client

    def create_hobby(self, payload: HobbyInput, image_id: int) -> None:
        """Insert a hobby row."""
        with translate_store_errors("create hobby"):
            self.client.table("hobbies").insert(
                {
                    "title": payload.title,
                    "description": payload.description,
                    "hobby_image_id": image_id,
                }
            ).execute()

    def list_hobbies(self) -> list[Hobby]:
        """Return hobbies in insertion order."""
        with translate_store_errors("list hobbies"):
            response = (
                self.client.table("hobbies")
                .select(f"id, title, description, {IMAGE_EMBED}")
                .order("id")
                .execute()
            )
        return [
            Hobby(
                id=int(row["id"]),
                title=str(row.get("title", "")),
                description=row.get("description"),
                image=parse_image(row.get("image")),
            )
            for row in response.data or []
        ]
