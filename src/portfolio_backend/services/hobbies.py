"""Hobby submissions and listing."""

import logging
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError

from portfolio_backend.domain.errors import StoreError
from portfolio_backend.domain.images import serialize_image
from portfolio_backend.domain.records import Hobby, HobbyInput
from portfolio_backend.domain.submissions import ErrorDetail
from portfolio_backend.services.images import ImageService

logger = logging.getLogger(__name__)


class HobbyRepository(Protocol):
    """Persistence interface for hobbies."""

    def create_hobby(self, payload: HobbyInput, image_id: int) -> None:
        """Insert a hobby referencing its image."""

    def list_hobbies(self) -> list[Hobby]:
        """Return all hobbies with their images."""


@dataclass
class HobbyService:
    """Handler for the hobby resource."""

    repository: HobbyRepository
    image_service: ImageService

    def insert_one(self, record: object) -> ErrorDetail | None:
        """Validate and store one hobby."""
        try:
            payload = HobbyInput.model_validate(record)
            image_id = self.image_service.resolve(
                payload.image_source, payload.image_alt
            )
            self.repository.create_hobby(payload, image_id)
        except ValidationError as exc:
            return ErrorDetail.from_validation(exc)
        except StoreError as exc:
            logger.warning(
                "Failed to store hobby",
                extra={"title": payload.title, "code": exc.code},
            )
            return ErrorDetail.from_store_error(exc)
        return None

    def list_all(self) -> list[dict[str, object]]:
        """Return every hobby in its public shape."""
        return [
            {
                "title": hobby.title,
                "description": hobby.description,
                "image": serialize_image(hobby.image),
            }
            for hobby in self.repository.list_hobbies()
        ]
