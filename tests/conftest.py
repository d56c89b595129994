"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import datetime

import pytest

from portfolio_backend.config import Settings
from portfolio_backend.containers import AppContainer
from portfolio_backend.domain.comments import CommentInput, CommentRecord
from portfolio_backend.domain.contact import EmailRequest, OutboundMail
from portfolio_backend.domain.errors import (
    DuplicateRecordError,
    MailDeliveryError,
    StoreError,
)
from portfolio_backend.domain.images import ImageRecord
from portfolio_backend.domain.records import (
    AcademicRecord,
    AcademicRecordInput,
    Activity,
    ActivityInput,
    Hobby,
    HobbyInput,
    SocialItem,
    SocialItemInput,
    WorkRecord,
    WorkRecordInput,
)
from portfolio_backend.services.academic import (
    AcademicRecordRepository,
    AcademicRecordService,
)
from portfolio_backend.services.activities import ActivityRepository, ActivityService
from portfolio_backend.services.comments import CommentRepository, CommentService
from portfolio_backend.services.contact import (
    ContactRateLimiter,
    ContactService,
    EmailRequestRepository,
    EmailRequestService,
    Mailer,
)
from portfolio_backend.services.hobbies import HobbyRepository, HobbyService
from portfolio_backend.services.images import ImageRepository, ImageService
from portfolio_backend.services.social import SocialItemRepository, SocialItemService
from portfolio_backend.services.work import WorkRecordRepository, WorkRecordService


@dataclass
class InMemoryImageRepository(ImageRepository):
    """In-memory image repository enforcing source uniqueness."""

    images: dict[int, ImageRecord] = field(default_factory=dict)

    def get_by_source(self, source: str) -> ImageRecord | None:
        for image in self.images.values():
            if image.source == source:
                return image
        return None

    def create_image(self, source: str, alt: str | None) -> ImageRecord:
        if self.get_by_source(source):
            raise DuplicateRecordError("duplicate source", code="23505")
        image = ImageRecord(id=len(self.images) + 1, source=source, alt=alt)
        self.images[image.id] = image
        return image


@dataclass
class InMemoryAcademicRecordRepository(AcademicRecordRepository):
    """In-memory academic records, unique by degree link."""

    images: InMemoryImageRepository
    rows: list[dict[str, object]] = field(default_factory=list)
    fail_listing: bool = False

    def create_record(self, payload: AcademicRecordInput, image_id: int) -> None:
        if any(row["degree_link"] == payload.degree_link for row in self.rows):
            raise DuplicateRecordError("duplicate degree link", code="23505")
        self.rows.append(
            {**payload.model_dump(), "id": len(self.rows) + 1, "image_id": image_id}
        )

    def list_records(self) -> list[AcademicRecord]:
        if self.fail_listing:
            raise StoreError("listing unavailable")
        return [
            AcademicRecord(
                id=row["id"],
                time_period=row["time_period"],
                degree_link=row["degree_link"],
                degree_title=row["degree_title"],
                degree_description=row["degree_description"],
                image=self.images.images.get(row["image_id"]),
            )
            for row in self.rows
        ]


@dataclass
class InMemoryWorkRecordRepository(WorkRecordRepository):
    """In-memory work records."""

    images: InMemoryImageRepository
    rows: list[dict[str, object]] = field(default_factory=list)

    def create_record(self, payload: WorkRecordInput, image_id: int) -> None:
        self.rows.append(
            {**payload.model_dump(), "id": len(self.rows) + 1, "image_id": image_id}
        )

    def list_records(self) -> list[WorkRecord]:
        return [
            WorkRecord(
                id=row["id"],
                time_period=row["time_period"],
                position=row["position"],
                description=row["description"],
                image=self.images.images.get(row["image_id"]),
            )
            for row in self.rows
        ]


@dataclass
class InMemoryHobbyRepository(HobbyRepository):
    """In-memory hobbies, unique by title."""

    images: InMemoryImageRepository
    rows: list[dict[str, object]] = field(default_factory=list)

    def create_hobby(self, payload: HobbyInput, image_id: int) -> None:
        if any(row["title"] == payload.title for row in self.rows):
            raise DuplicateRecordError("duplicate title", code="23505")
        self.rows.append(
            {**payload.model_dump(), "id": len(self.rows) + 1, "image_id": image_id}
        )

    def list_hobbies(self) -> list[Hobby]:
        return [
            Hobby(
                id=row["id"],
                title=row["title"],
                description=row["description"],
                image=self.images.images.get(row["image_id"]),
            )
            for row in self.rows
        ]


@dataclass
class InMemorySocialItemRepository(SocialItemRepository):
    """In-memory social links."""

    images: InMemoryImageRepository
    rows: list[dict[str, object]] = field(default_factory=list)

    def create_item(self, payload: SocialItemInput, image_id: int) -> None:
        self.rows.append(
            {**payload.model_dump(), "id": len(self.rows) + 1, "image_id": image_id}
        )

    def list_items(self) -> list[SocialItem]:
        return [
            SocialItem(
                id=row["id"],
                title=row["title"],
                link_page=row["link_page"],
                image=self.images.images.get(row["image_id"]),
            )
            for row in self.rows
        ]


@dataclass
class InMemoryActivityRepository(ActivityRepository):
    """In-memory activities, unique by title."""

    activities: list[Activity] = field(default_factory=list)

    def create_activity(self, payload: ActivityInput) -> None:
        if any(activity.title == payload.title for activity in self.activities):
            raise DuplicateRecordError("duplicate title", code="23505")
        self.activities.append(
            Activity(
                id=len(self.activities) + 1,
                title=payload.title,
                description=payload.description,
            )
        )

    def list_activities(self) -> list[Activity]:
        return list(self.activities)


@dataclass
class InMemoryCommentRepository(CommentRepository):
    """In-memory comments keyed by email."""

    comments: dict[str, CommentRecord] = field(default_factory=dict)

    def get_by_email(self, email: str) -> CommentRecord | None:
        return self.comments.get(email)

    def create_comment(self, payload: CommentInput, updated_at: datetime) -> None:
        self.comments[payload.email] = CommentRecord(
            id=len(self.comments) + 1,
            first_name=payload.first_name,
            last_name=payload.last_name,
            email=payload.email,
            comment=payload.comment,
            updated_at=updated_at,
        )

    def update_comment(
        self, comment_id: int, comment: str, updated_at: datetime
    ) -> None:
        for email, existing in self.comments.items():
            if existing.id == comment_id:
                self.comments[email] = CommentRecord(
                    id=existing.id,
                    first_name=existing.first_name,
                    last_name=existing.last_name,
                    email=existing.email,
                    comment=comment,
                    updated_at=updated_at,
                )

    def list_comments(self) -> list[CommentRecord]:
        return sorted(
            self.comments.values(), key=lambda row: row.updated_at, reverse=True
        )


@dataclass
class InMemoryEmailRequestRepository(EmailRequestRepository):
    """In-memory email request ledger."""

    requests: list[EmailRequest] = field(default_factory=list)

    def create_request(self, email: str, created_at: datetime) -> None:
        self.requests.append(
            EmailRequest(id=len(self.requests) + 1, email=email, created_at=created_at)
        )

    def has_request_since(self, since: datetime) -> bool:
        return any(request.created_at >= since for request in self.requests)

    def list_recent(self, limit: int) -> list[EmailRequest]:
        return sorted(
            self.requests, key=lambda request: request.created_at, reverse=True
        )[:limit]

    def clear(self) -> int:
        deleted = len(self.requests)
        self.requests.clear()
        return deleted


@dataclass
class FakeMailer(Mailer):
    """Mailer that records outgoing mail instead of sending it."""

    sent: list[OutboundMail] = field(default_factory=list)
    fail: bool = False

    def send(self, mail: OutboundMail) -> None:
        if self.fail:
            raise MailDeliveryError("SMTP server unavailable")
        self.sent.append(mail)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        admin_token="admin-token",
        mail_sender="portfolio@example.com",
        mail_password="mail-password",
        mail_recipient="owner@example.com",
    )


@pytest.fixture
def image_repository() -> InMemoryImageRepository:
    return InMemoryImageRepository()


@pytest.fixture
def email_request_repository() -> InMemoryEmailRequestRepository:
    return InMemoryEmailRequestRepository()


@pytest.fixture
def mailer() -> FakeMailer:
    return FakeMailer()


@pytest.fixture
def container(
    settings: Settings,
    image_repository: InMemoryImageRepository,
    email_request_repository: InMemoryEmailRequestRepository,
    mailer: FakeMailer,
) -> AppContainer:
    image_service = ImageService(image_repository)
    email_request_service = EmailRequestService(email_request_repository)
    contact_service = ContactService(
        mailer=mailer,
        rate_limiter=ContactRateLimiter(
            email_request_repository,
            window_seconds=settings.contact_window_seconds,
        ),
        email_requests=email_request_service,
        sender=settings.mail_sender,
        recipient=settings.mail_recipient,
        invalid_body_message=settings.invalid_body_message,
    )
    return AppContainer(
        settings=settings,
        image_service=image_service,
        academic_service=AcademicRecordService(
            InMemoryAcademicRecordRepository(image_repository), image_service
        ),
        work_service=WorkRecordService(
            InMemoryWorkRecordRepository(image_repository), image_service
        ),
        hobby_service=HobbyService(
            InMemoryHobbyRepository(image_repository), image_service
        ),
        social_service=SocialItemService(
            InMemorySocialItemRepository(image_repository), image_service
        ),
        activity_service=ActivityService(InMemoryActivityRepository()),
        comment_service=CommentService(InMemoryCommentRepository()),
        email_request_service=email_request_service,
        contact_service=contact_service,
    )
