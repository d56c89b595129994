"""Contact form relay with a shared rate limit."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol

from pydantic import ValidationError

from portfolio_backend.domain.contact import (
    ContactMessage,
    EmailRequest,
    EmailRequestInput,
    OutboundMail,
)
from portfolio_backend.domain.errors import MailDeliveryError, StoreError
from portfolio_backend.domain.submissions import ErrorDetail
from portfolio_backend.services.submissions import process_submission

logger = logging.getLogger(__name__)

RATE_LIMITED_MESSAGE = (
    "Looks like another person sent an email recently! Please wait "
    "up to 5 minutes to try again!"
)


class EmailRequestRepository(Protocol):
    """Persistence interface for the email request ledger."""

    def create_request(self, email: str, created_at: datetime) -> None:
        """Append a ledger row."""

    def has_request_since(self, since: datetime) -> bool:
        """Return True when any row was created at or after ``since``."""

    def list_recent(self, limit: int) -> list[EmailRequest]:
        """Return the newest ledger rows."""

    def clear(self) -> int:
        """Delete every ledger row and return how many were removed."""


class Mailer(Protocol):
    """Interface for outbound email delivery."""

    def send(self, mail: OutboundMail) -> None:
        """Deliver the email or raise MailDeliveryError."""


@dataclass
class ContactRateLimiter:
    """Allows one contact email per trailing window across all visitors."""

    repository: EmailRequestRepository
    window_seconds: int = 300

    def is_allowed(self, now: datetime | None = None) -> bool:
        """Return False when an email was relayed within the window."""
        current = now or datetime.now(tz=UTC)
        since = current - timedelta(seconds=self.window_seconds)
        return not self.repository.has_request_since(since)


@dataclass
class EmailRequestService:
    """Handler that records relayed emails in the ledger."""

    repository: EmailRequestRepository

    def insert_one(self, record: object) -> ErrorDetail | None:
        """Append a ledger row stamped with the current time."""
        try:
            payload = EmailRequestInput.model_validate(record)
            self.repository.create_request(
                payload.email, created_at=datetime.now(tz=UTC)
            )
        except ValidationError as exc:
            return ErrorDetail.from_validation(exc)
        except StoreError as exc:
            logger.warning(
                "Failed to record email request", extra={"code": exc.code}
            )
            return ErrorDetail.from_store_error(exc)
        return None

    def list_all(self) -> dict[str, object]:
        return {"success": True}

    def list_recent(self, limit: int = 20) -> list[dict[str, object]]:
        """Return the newest ledger rows for administrators."""
        return [
            {
                "id": request.id,
                "email": request.email,
                "createdAt": request.created_at.isoformat(),
            }
            for request in self.repository.list_recent(limit)
        ]

    def clear(self) -> int:
        """Clear the ledger."""
        return self.repository.clear()


@dataclass
class ContactService:
    """Relays contact messages to the portfolio owner."""

    mailer: Mailer
    rate_limiter: ContactRateLimiter
    email_requests: EmailRequestService
    sender: str
    recipient: str
    invalid_body_message: str

    def relay(self, message: ContactMessage) -> object:
        """Send the message unless another one went out within the window."""
        if not self.rate_limiter.is_allowed():
            return {"success": False, "errorMessage": RATE_LIMITED_MESSAGE}
        try:
            self.mailer.send(self.build_mail(message))
        except MailDeliveryError as exc:
            logger.exception("Failed to relay contact email")
            return {"success": False, "errorMessage": str(exc)}
        return process_submission(
            message.model_dump(by_alias=True),
            self.email_requests,
            self.invalid_body_message,
        )

    def build_mail(self, message: ContactMessage) -> OutboundMail:
        """Build the email, copying the visitor so replies reach them."""
        text = (
            "This is a message sent from Portfolio website, this message was sent "
            f"by: {message.first_name} {message.last_name}. "
            "Content is shown below:\n"
            f"{message.message}{_contact_info(message)}"
        )
        return OutboundMail(
            sender=self.sender,
            recipient=self.recipient,
            subject=message.subject,
            text=text,
            cc=message.email,
        )


def _contact_info(message: ContactMessage) -> str:
    lines = ""
    if message.company:
        lines += f"Company: {message.company}\n"
    if message.phone:
        lines += f"Country: {message.country}\nPhone: {message.phone}"
    if not lines:
        return ""
    return f"\n\nContact info:\n{lines}"
