"""Supabase-backed academic record repository."""

from dataclasses import dataclass

from supabase import Client

from portfolio_backend.adapters.supabase_errors import translate_store_errors
from portfolio_backend.adapters.supabase_image_repository import (
    IMAGE_EMBED,
    parse_image,
)
from portfolio_backend.domain.records import AcademicRecord, AcademicRecordInput
from portfolio_backend.services.academic import AcademicRecordRepository


@dataclass
class SupabaseAcademicRecordRepository(AcademicRecordRepository):
    """Supabase implementation for academic records."""

    client: Client

    def create_record(self, payload: AcademicRecordInput, image_id: int) -> None:
        """Insert an academic record row."""
        with translate_store_errors("create academic record"):
            self.client.table("academic_records").insert(
                {
                    "time_period": payload.time_period,
                    "degree_link": payload.degree_link,
                    "degree_title": payload.degree_title,
                    "degree_description": payload.degree_description,
                    "institution_image_id": image_id,
                }
            ).execute()

    def list_records(self) -> list[AcademicRecord]:
        """Return academic records in insertion order."""
        with translate_store_errors("list academic records"):
            response = (
                self.client.table("academic_records")
                .select(
                    "id, time_period, degree_link, degree_title, "
                    f"degree_description, {IMAGE_EMBED}"
                )
                .order("id")
                .execute()
            )
        return [
            AcademicRecord(
                id=int(row["id"]),
                time_period=str(row.get("time_period", "")),
                degree_link=str(row.get("degree_link", "")),
                degree_title=str(row.get("degree_title", "")),
                degree_description=row.get("degree_description"),
                image=parse_image(row.get("image")),
            )
            for row in response.data or []
        ]
