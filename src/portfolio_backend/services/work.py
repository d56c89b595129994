"""Work record submissions and listing."""

import logging
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError

from portfolio_backend.domain.errors import StoreError
from portfolio_backend.domain.images import serialize_image
from portfolio_backend.domain.records import WorkRecord, WorkRecordInput
from portfolio_backend.domain.submissions import ErrorDetail
from portfolio_backend.services.images import ImageService

logger = logging.getLogger(__name__)


class WorkRecordRepository(Protocol):
    """Persistence interface for work records."""

    def create_record(self, payload: WorkRecordInput, image_id: int) -> None:
        """Insert a work record referencing a company image."""

    def list_records(self) -> list[WorkRecord]:
        """Return all work records with their images."""


@dataclass
class WorkRecordService:
    """Handler for the work record resource."""

    repository: WorkRecordRepository
    image_service: ImageService

    def insert_one(self, record: object) -> ErrorDetail | None:
        """Validate and store one work record."""
        try:
            payload = WorkRecordInput.model_validate(record)
            image_id = self.image_service.resolve(
                payload.image_source, payload.image_alt
            )
            self.repository.create_record(payload, image_id)
        except ValidationError as exc:
            return ErrorDetail.from_validation(exc)
        except StoreError as exc:
            logger.warning(
                "Failed to store work record",
                extra={"position": payload.position, "code": exc.code},
            )
            return ErrorDetail.from_store_error(exc)
        return None

    def list_all(self) -> list[dict[str, object]]:
        """Return every work record in its public shape."""
        return [_serialize(record) for record in self.repository.list_records()]


def _serialize(record: WorkRecord) -> dict[str, object]:
    return {
        "image": serialize_image(record.image),
        "timePeriod": record.time_period,
        "position": record.position,
        "description": record.description,
    }
