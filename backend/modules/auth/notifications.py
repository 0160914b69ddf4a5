"""
Welcome email notifier.

Sends a plain-text welcome message over SMTP after a successful signup.
The send is best effort: the auth service runs it as a detached task and
only records its failure.
"""

import asyncio
import logging
import smtplib
from email.mime.text import MIMEText
from typing import Optional

from shared.config import Settings

logger = logging.getLogger(__name__)

WELCOME_SUBJECT = "Welcome to Our App!"
WELCOME_BODY = "Thanks for signing up! We are excited to have you with us."


class SmtpWelcomeNotifier:
    """IWelcomeNotifier implementation over smtplib with STARTTLS."""

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        sender: Optional[str] = None,
        timeout: float = 30.0,
    ):
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._sender = sender or username
        self._timeout = timeout

    def build_message(self, email: str) -> MIMEText:
        message = MIMEText(WELCOME_BODY)
        message["Subject"] = WELCOME_SUBJECT
        message["From"] = self._sender
        message["To"] = email
        return message

    async def send_welcome(self, email: str) -> None:
        await asyncio.to_thread(self._send, email)
        logger.info("Welcome email sent")

    def _send(self, email: str) -> None:
        message = self.build_message(email)
        with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as server:
            server.starttls()
            server.login(self._username, self._password)
            server.send_message(message)


def create_welcome_notifier(settings: Settings) -> Optional[SmtpWelcomeNotifier]:
    """
    Build the notifier from settings.

    Returns None when the email credentials are not both set, which
    disables the welcome email.
    """
    if not settings.email_enabled:
        logger.info("Email credentials not configured, welcome email disabled")
        return None
    return SmtpWelcomeNotifier(
        host=settings.smtp_host,
        port=settings.smtp_port,
        username=settings.email_user,
        password=settings.email_pass,
    )
