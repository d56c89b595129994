"""Supabase-backed social link repository."""

from dataclasses import dataclass

from supabase import Client

from portfolio_backend.adapters.supabase_errors import translate_store_errors
from portfolio_backend.adapters.supabase_image_repository import (
    IMAGE_EMBED,
    parse_image,
)
from portfolio_backend.domain.records import SocialItem, SocialItemInput
from portfolio_backend.services.social import SocialItemRepository


@dataclass
class SupabaseSocialItemRepository(SocialItemRepository):
    """Supabase implementation for social links."""

    client: Client

    def create_item(self, payload: SocialItemInput, image_id: int) -> None:
        """Insert a social item row."""
        with translate_store_errors("create social item"):
            self.client.table("social_items").insert(
                {
                    "title": payload.title,
                    "link_page": payload.link_page,
                    "social_image_id": image_id,
                }
            ).execute()

    def list_items(self) -> list[SocialItem]:
        """Return social items in insertion order."""
        with translate_store_errors("list social items"):
            response = (
                self.client.table("social_items")
                .select(f"id, title, link_page, {IMAGE_EMBED}")
                .order("id")
                .execute()
            )
        return [
            SocialItem(
                id=int(row["id"]),
                title=str(row.get("title", "")),
                link_page=str(row.get("link_page", "")),
                image=parse_image(row.get("image")),
            )
            for row in response.data or []
        ]
