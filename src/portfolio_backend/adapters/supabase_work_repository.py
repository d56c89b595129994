"""Supabase-backed work record repository."""

from dataclasses import dataclass

from supabase import Client

from portfolio_backend.adapters.supabase_errors import translate_store_errors
from portfolio_backend.adapters.supabase_image_repository import (
    IMAGE_EMBED,
    parse_image,
)
from portfolio_backend.domain.records import WorkRecord, WorkRecordInput
from portfolio_backend.services.work import WorkRecordRepository


@dataclass
class SupabaseWorkRecordRepository(WorkRecordRepository):
    """Supabase implementation for work records."""

    client: Client

    def create_record(self, payload: WorkRecordInput, image_id: int) -> None:
        """Insert a work record row."""
        with translate_store_errors("create work record"):
            self.client.table("work_records").insert(
                {
                    "time_period": payload.time_period,
                    "position": payload.position,
                    "description": payload.description,
                    "company_image_id": image_id,
                }
            ).execute()

    def list_records(self) -> list[WorkRecord]:
        """Return work records in insertion order."""
        with translate_store_errors("list work records"):
            response = (
                self.client.table("work_records")
                .select(f"id, time_period, position, description, {IMAGE_EMBED}")
                .order("id")
                .execute()
            )
        return [
            WorkRecord(
                id=int(row["id"]),
                time_period=str(row.get("time_period", "")),
                position=str(row.get("position", "")),
                description=row.get("description"),
                image=parse_image(row.get("image")),
            )
            for row in response.data or []
        ]
