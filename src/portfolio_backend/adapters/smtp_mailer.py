"""SMTP mail relay adapter."""

import smtplib
import ssl
from collections.abc import Callable
from dataclasses import dataclass, field
from email.message import EmailMessage

from portfolio_backend.domain.contact import OutboundMail
from portfolio_backend.domain.errors import MailDeliveryError
from portfolio_backend.services.contact import Mailer


@dataclass
class SmtpMailer(Mailer):
    """Mailer that logs in to an SMTP server over SSL."""

    host: str
    port: int
    username: str
    password: str
    smtp_factory: Callable[..., smtplib.SMTP] = field(default=smtplib.SMTP_SSL)

    def send(self, mail: OutboundMail) -> None:
        """Send the email, raising MailDeliveryError on any SMTP failure."""
        try:
            message = _build_message(mail)
        except ValueError as exc:
            # Header values carrying CR or LF are refused by the email policy.
            raise MailDeliveryError(f"Invalid email headers: {exc}") from exc

        context = ssl.create_default_context()
        try:
            with self.smtp_factory(self.host, self.port, context=context) as smtp:
                smtp.login(self.username, self.password)
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError) as exc:
            raise MailDeliveryError(f"Failed to send email: {exc}") from exc


def _build_message(mail: OutboundMail) -> EmailMessage:
    message = EmailMessage()
    message["From"] = mail.sender
    message["To"] = mail.recipient
    if mail.cc:
        message["Cc"] = mail.cc
    message["Subject"] = mail.subject
    message.set_content(mail.text)
    return message
