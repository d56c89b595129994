"""Supabase-backed image repository."""

from dataclasses import dataclass

from supabase import Client

from portfolio_backend.adapters.supabase_errors import translate_store_errors
from portfolio_backend.domain.errors import StoreError
from portfolio_backend.domain.images import ImageRecord
from portfolio_backend.services.images import ImageRepository

IMAGE_EMBED = "image:image_records(id, source, alt)"


@dataclass
class SupabaseImageRepository(ImageRepository):
    """Supabase implementation for image assets."""

    client: Client

    def get_by_source(self, source: str) -> ImageRecord | None:
        """Return the image with an exact source match, if present."""
        with translate_store_errors("look up image"):
            response = (
                self.client.table("image_records")
                .select("id, source, alt")
                .eq("source", source)
                .limit(1)
                .execute()
            )
        if not response.data:
            return None
        return parse_image(response.data[0])

    def create_image(self, source: str, alt: str | None) -> ImageRecord:
        """Insert a new image row and return it."""
        with translate_store_errors("create image"):
            response = (
                self.client.table("image_records")
                .insert({"source": source, "alt": alt})
                .execute()
            )
        if not response.data:
            raise StoreError("Failed to create image record")
        return parse_image(response.data[0])


def parse_image(row: object) -> ImageRecord | None:
    """Parse an image row or an embedded image object."""
    if not isinstance(row, dict):
        return None
    return ImageRecord(
        id=int(row["id"]),
        source=str(row.get("source", "")),
        alt=row.get("alt"),
    )
