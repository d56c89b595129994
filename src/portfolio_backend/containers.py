"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from portfolio_backend.adapters.smtp_mailer import SmtpMailer
from portfolio_backend.adapters.supabase_academic_repository import (
    SupabaseAcademicRecordRepository,
)
from portfolio_backend.adapters.supabase_activity_repository import (
    SupabaseActivityRepository,
)
from portfolio_backend.adapters.supabase_comment_repository import (
    SupabaseCommentRepository,
)
from portfolio_backend.adapters.supabase_email_request_repository import (
    SupabaseEmailRequestRepository,
)
from portfolio_backend.adapters.supabase_hobby_repository import SupabaseHobbyRepository
from portfolio_backend.adapters.supabase_image_repository import SupabaseImageRepository
from portfolio_backend.adapters.supabase_social_repository import (
    SupabaseSocialItemRepository,
)
from portfolio_backend.adapters.supabase_work_repository import (
    SupabaseWorkRecordRepository,
)
from portfolio_backend.config import Settings
from portfolio_backend.services.academic import AcademicRecordService
from portfolio_backend.services.activities import ActivityService
from portfolio_backend.services.comments import CommentService
from portfolio_backend.services.contact import (
    ContactRateLimiter,
    ContactService,
    EmailRequestService,
)
from portfolio_backend.services.hobbies import HobbyService
from portfolio_backend.services.images import ImageService
from portfolio_backend.services.social import SocialItemService
from portfolio_backend.services.work import WorkRecordService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    image_service: ImageService
    academic_service: AcademicRecordService
    work_service: WorkRecordService
    hobby_service: HobbyService
    social_service: SocialItemService
    activity_service: ActivityService
    comment_service: CommentService
    email_request_service: EmailRequestService
    contact_service: ContactService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    image_service = ImageService(SupabaseImageRepository(supabase_client))
    email_request_repository = SupabaseEmailRequestRepository(supabase_client)
    email_request_service = EmailRequestService(email_request_repository)
    mailer = SmtpMailer(
        host=resolved_settings.smtp_host,
        port=resolved_settings.smtp_port,
        username=resolved_settings.mail_sender,
        password=resolved_settings.mail_password,
    )
    contact_service = ContactService(
        mailer=mailer,
        rate_limiter=ContactRateLimiter(
            email_request_repository,
            window_seconds=resolved_settings.contact_window_seconds,
        ),
        email_requests=email_request_service,
        sender=resolved_settings.mail_sender,
        recipient=resolved_settings.mail_recipient,
        invalid_body_message=resolved_settings.invalid_body_message,
    )

    return AppContainer(
        settings=resolved_settings,
        image_service=image_service,
        academic_service=AcademicRecordService(
            SupabaseAcademicRecordRepository(supabase_client), image_service
        ),
        work_service=WorkRecordService(
            SupabaseWorkRecordRepository(supabase_client), image_service
        ),
        hobby_service=HobbyService(
            SupabaseHobbyRepository(supabase_client), image_service
        ),
        social_service=SocialItemService(
            SupabaseSocialItemRepository(supabase_client), image_service
        ),
        activity_service=ActivityService(SupabaseActivityRepository(supabase_client)),
        comment_service=CommentService(SupabaseCommentRepository(supabase_client)),
        email_request_service=email_request_service,
        contact_service=contact_service,
    )
