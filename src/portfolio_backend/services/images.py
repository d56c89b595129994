"""Image-reference resolution shared by image-backed records."""

import logging
from dataclasses import dataclass
from typing import Protocol

from portfolio_backend.domain.errors import DuplicateRecordError
from portfolio_backend.domain.images import ImageRecord

logger = logging.getLogger(__name__)


class ImageRepository(Protocol):
    """Persistence interface for image assets."""

    def get_by_source(self, source: str) -> ImageRecord | None:
        """Return the image with an exact source match, if present."""

    def create_image(self, source: str, alt: str | None) -> ImageRecord:
        """Create an image row; raise DuplicateRecordError if the source exists."""


@dataclass
class ImageService:
    """Deduplicates image assets by source."""

    repository: ImageRepository

    def resolve(self, source: str, alt: str | None) -> int:
        """Return the id of the image for ``source``, creating it if needed.

        The alt text of an existing image is never updated.
        """
        existing = self.repository.get_by_source(source)
        if existing:
            return existing.id
        try:
            return self.repository.create_image(source, alt).id
        except DuplicateRecordError:
            winner = self.repository.get_by_source(source)
            if winner is None:
                raise
            logger.info(
                "Image created concurrently, reusing it", extra={"source": source}
            )
            return winner.id
