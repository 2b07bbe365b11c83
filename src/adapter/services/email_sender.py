"""
Email senders

LogEmailSender writes messages to the application log (development).
SmtpEmailSender delivers through an SMTP relay.
"""

import asyncio
import logging
import smtplib
from abc import abstractmethod
from email.message import EmailMessage
from urllib.parse import urlencode
from uuid import UUID

from src.app.services.email_sender import EmailDeliveryError, IEmailSender

logger = logging.getLogger(__name__)


class BaseEmailSender(IEmailSender):
    """Builds the messages; subclasses decide how they are delivered"""

    def __init__(
        self,
        from_address: str,
        from_name: str,
        app_url: str,
        frontend_url: str,
        api_prefix: str = "/api",
    ):
        self.from_address = from_address
        self.from_name = from_name
        self.app_url = app_url.rstrip("/")
        self.frontend_url = frontend_url.rstrip("/")
        self.api_prefix = api_prefix

    @abstractmethod
    async def _deliver(self, message: EmailMessage) -> None:
        pass

    def _build(self, to_email: str, subject: str, body: str) -> EmailMessage:
        message = EmailMessage()
        message["Subject"] = subject
        message["From"] = f"{self.from_name} <{self.from_address}>"
        message["To"] = to_email
        message.set_content(body)
        return message

    async def send_password_reset_link(self, email: str, token: str) -> None:
        query = urlencode({"token": token, "email": email})
        link = f"{self.frontend_url}/reset-password?{query}"
        body = (
            "Hello,\n\n"
            "You are receiving this email because we received a password reset "
            "request for your account.\n\n"
            f"Reset your password: {link}\n\n"
            "If you did not request a password reset, no further action is required.\n"
        )
        await self._deliver(self._build(email, "Reset Password Notification", body))

    async def send_verification_link(self, email: str, user_id: UUID, token: str) -> None:
        query = urlencode({"token": token})
        link = f"{self.app_url}{self.api_prefix}/v1/email/verify/{user_id}?{query}"
        body = (
            "Hello,\n\n"
            "Please click the link below to verify your email address.\n\n"
            f"Verify email address: {link}\n\n"
            "If you did not create an account, no further action is required.\n"
        )
        await self._deliver(self._build(email, "Verify Email Address", body))


class LogEmailSender(BaseEmailSender):
    """
    Writes outgoing messages to the log instead of sending them.

    The body carries live tokens, so it is only logged at DEBUG.
    """

    async def _deliver(self, message: EmailMessage) -> None:
        logger.info("Mail to %s (%s)", message["To"], message["Subject"])
        logger.debug("Mail body:\n%s", message.get_content())


class SmtpEmailSender(BaseEmailSender):
    """Sends messages through an SMTP relay"""

    def __init__(
        self,
        host: str,
        port: int,
        username: str = "",
        password: str = "",
        use_tls: bool = True,
        timeout: float = 10.0,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.timeout = timeout

    def _send_blocking(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
            if self.use_tls:
                server.starttls()
            if self.username:
                server.login(self.username, self.password)
            server.send_message(message)

    async def _deliver(self, message: EmailMessage) -> None:
        try:
            await asyncio.to_thread(self._send_blocking, message)
        except (smtplib.SMTPException, OSError) as exc:
            logger.error(
                "Failed to send '%s' to %s: %s",
                message["Subject"],
                message["To"],
                type(exc).__name__,
            )
            raise EmailDeliveryError(str(exc)) from exc
        logger.info("Sent '%s' to %s", message["Subject"], message["To"])
