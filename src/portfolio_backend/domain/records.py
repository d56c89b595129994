"""Domain models for portfolio content records."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from portfolio_backend.domain.images import ImageRecord


class RecordInput(BaseModel):
    """Base for submitted records using camelCase wire names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ImageBackedInput(RecordInput):
    """Submitted record that references an image by source."""

    image_source: str
    image_alt: str | None = None


class AcademicRecordInput(ImageBackedInput):
    """Academic record as submitted by the portfolio owner."""

    time_period: str
    degree_link: str
    degree_title: str
    degree_description: str | None = None


class WorkRecordInput(ImageBackedInput):
    """Work record as submitted by the portfolio owner."""

    time_period: str
    position: str
    description: str | None = None


class HobbyInput(ImageBackedInput):
    """Hobby as submitted by the portfolio owner."""

    title: str
    description: str | None = None


class SocialItemInput(ImageBackedInput):
    """Social link as submitted by the portfolio owner."""

    title: str
    link_page: str


class ActivityInput(RecordInput):
    """Activity as submitted by the portfolio owner."""

    title: str
    description: str | None = None


@dataclass(frozen=True)
class AcademicRecord:
    """Stored academic record with its institution image."""

    id: int
    time_period: str
    degree_link: str
    degree_title: str
    degree_description: str | None
    image: ImageRecord | None


@dataclass(frozen=True)
class WorkRecord:
    """Stored work record with its company image."""

    id: int
    time_period: str
    position: str
    description: str | None
    image: ImageRecord | None


@dataclass(frozen=True)
class Hobby:
    """Stored hobby with its image."""

    id: int
    title: str
    description: str | None
    image: ImageRecord | None


@dataclass(frozen=True)
class SocialItem:
    """Stored social link with its icon image."""

    id: int
    title: str
    link_page: str
    image: ImageRecord | None


@dataclass(frozen=True)
class Activity:
    """Stored activity."""

    id: int
    title: str
    description: str | None
