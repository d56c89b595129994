"""Academic record submissions and listing."""

import logging
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError

from portfolio_backend.domain.errors import StoreError
from portfolio_backend.domain.images import serialize_image
from portfolio_backend.domain.records import AcademicRecord, AcademicRecordInput
from portfolio_backend.domain.submissions import ErrorDetail
from portfolio_backend.services.images import ImageService

logger = logging.getLogger(__name__)


class AcademicRecordRepository(Protocol):
    """Persistence interface for academic records."""

    def create_record(self, payload: AcademicRecordInput, image_id: int) -> None:
        """Insert an academic record referencing an institution image."""

    def list_records(self) -> list[AcademicRecord]:
        """Return all academic records with their images."""


@dataclass
class AcademicRecordService:
    """Handler for the academic record resource."""

    repository: AcademicRecordRepository
    image_service: ImageService

    def insert_one(self, record: object) -> ErrorDetail | None:
        """Validate and store one academic record."""
        try:
            payload = AcademicRecordInput.model_validate(record)
            image_id = self.image_service.resolve(
                payload.image_source, payload.image_alt
            )
            self.repository.create_record(payload, image_id)
        except ValidationError as exc:
            return ErrorDetail.from_validation(exc)
        except StoreError as exc:
            logger.warning(
                "Failed to store academic record",
                extra={"degree_link": payload.degree_link, "code": exc.code},
            )
            return ErrorDetail.from_store_error(exc)
        return None

    def list_all(self) -> list[dict[str, object]]:
        """Return every academic record in its public shape."""
        return [_serialize(record) for record in self.repository.list_records()]


def _serialize(record: AcademicRecord) -> dict[str, object]:
    return {
        "timePeriod": record.time_period,
        "image": serialize_image(record.image),
        "degree": {
            "link": record.degree_link,
            "title": record.degree_title,
            "description": record.degree_description,
        },
    }
