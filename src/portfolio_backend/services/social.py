"""Social link submissions and listing."""

import logging
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError

from portfolio_backend.domain.errors import StoreError
from portfolio_backend.domain.images import serialize_image
from portfolio_backend.domain.records import SocialItem, SocialItemInput
from portfolio_backend.domain.submissions import ErrorDetail
from portfolio_backend.services.images import ImageService

logger = logging.getLogger(__name__)


class SocialItemRepository(Protocol):
    """Persistence interface for social links."""

    def create_item(self, payload: SocialItemInput, image_id: int) -> None:
        """Insert a social link referencing its icon image."""

    def list_items(self) -> list[SocialItem]:
        """Return all social links with their images."""


@dataclass
class SocialItemService:
    """Handler for the social link resource."""

    repository: SocialItemRepository
    image_service: ImageService

    def insert_one(self, record: object) -> ErrorDetail | None:
        try:
            payload = SocialItemInput.model_validate(record)
            image_id = self.image_service.resolve(
                payload.image_source, payload.image_alt
            )
            self.repository.create_item(payload, image_id)
        except ValidationError as exc:
            return ErrorDetail.from_validation(exc)
        except StoreError as exc:
            logger.warning(
                "Failed to store social item",
                extra={"title": payload.title, "code": exc.code},
            )
            return ErrorDetail.from_store_error(exc)
        return None

    def list_all(self) -> list[dict[str, object]]:
        return [
            {
                "title": item.title,
                "linkPage": item.link_page,
                "image": serialize_image(item.image),
            }
            for item in self.repository.list_items()
        ]
