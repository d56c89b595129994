"""Domain models for contact messages and the email request ledger."""

from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ContactMessage(BaseModel):
    """Message sent from the portfolio contact form."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: str
    last_name: str
    email: str
    subject: str
    message: str
    company: str = ""
    country: str = ""
    phone: str = ""


class EmailRequestInput(BaseModel):
    """Ledger entry submitted after a contact email was relayed."""

    email: str


@dataclass(frozen=True)
class EmailRequest:
    """Stored record of a relayed contact email."""

    id: int
    email: str
    created_at: datetime


@dataclass(frozen=True)
class OutboundMail:
    """Email ready to be handed to the mail relay."""

    sender: str
    recipient: str
    subject: str
    text: str
    cc: str | None = None
