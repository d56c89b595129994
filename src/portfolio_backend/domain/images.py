"""Domain models for shared image assets."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ImageRecord:
    """Image asset referenced by portfolio content."""

    id: int
    source: str
    alt: str | None


def serialize_image(image: ImageRecord | None) -> dict[str, object] | None:
    """Return the public representation of an image reference."""
    if image is None:
        return None
    return {"source": image.source, "alt": image.alt}
