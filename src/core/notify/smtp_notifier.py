"""Gmail SMTP notifier using implicit TLS on port 465 with an app password."""

import logging
import smtplib
from email.message import EmailMessage
from email.utils import formataddr

from core.errors import ConfigurationError, NotificationError
from core.models import EmailNotification

from .interface import Notifier

logger = logging.getLogger(__name__)

SMTP_HOST = "smtp.gmail.com"
SMTP_PORT = 465


class SmtpNotifier(Notifier):
    def __init__(self, username: str, password: str, from_name: str, timeout: float = 30.0):
        self._username = username
        self._password = password
        self._from_name = from_name
        self._timeout = timeout

    def _build_message(self, notification: EmailNotification) -> EmailMessage:
        message = EmailMessage()
        message["From"] = formataddr((self._from_name, self._username))
        message["To"] = notification.to
        if notification.cc:
            message["Cc"] = ", ".join(notification.cc)
        message["Subject"] = notification.subject
        message.set_content(notification.text)
        return message

    def ensure_configured(self) -> None:
        if not self._username or not self._password:
            raise ConfigurationError("Missing GMAIL_USER or GMAIL_APP_PASSWORD")

    def send(self, notification: EmailNotification) -> None:
        self.ensure_configured()
        message = self._build_message(notification)
        try:
            with smtplib.SMTP_SSL(SMTP_HOST, SMTP_PORT, timeout=self._timeout) as smtp:
                smtp.login(self._username, self._password)
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError) as e:
            raise NotificationError(f"Failed to send email: {e}") from e

        logger.info("Sent notification (cc %d)", len(notification.cc))
