import logging
from email.message import EmailMessage
from typing import Optional

from starlette.concurrency import run_in_threadpool

from app.core.config import Settings, settings as default_settings
from app.domains.contact.schemas import ContactMessage
from app.infrastructure.mail.smtp import MailDeliveryError, SMTPMailer

logger = logging.getLogger(__name__)


class ContactService:
    """Сервис пересылки сообщений из формы обратной связи на почту"""

    def __init__(self, settings: Optional[Settings] = None, mailer: Optional[SMTPMailer] = None):
        self.settings = settings or default_settings
        self.mailer = mailer or SMTPMailer(
            host=self.settings.smtp_host,
            port=self.settings.smtp_port,
            username=self.settings.email_user,
            password=self.settings.email_pass,
            use_ssl=self.settings.smtp_use_ssl,
            timeout=self.settings.smtp_timeout
        )

    def build_email(self, message: ContactMessage) -> EmailMessage:
        """Формирование письма из сообщения формы"""
        email = EmailMessage()
        email["From"] = self.settings.email_user
        email["To"] = self.settings.email_to or self.settings.email_user
        email["Reply-To"] = message.email
        email["Subject"] = f"New message from {message.name}"
        email.set_content(
            f"Name: {message.name}\nEmail: {message.email}\nMessage: {message.message}"
        )
        return email

    async def submit(self, message: ContactMessage) -> bool:
        """Пересылка сообщения; False при любой ошибке доставки"""
        if not self.settings.email_user or not self.settings.email_pass:
            logger.error("Mail credentials are not configured, contact message dropped")
            return False

        try:
            await run_in_threadpool(self.mailer.send, self.build_email(message))
        except (MailDeliveryError, ValueError) as e:
            logger.error(f"Error handling contact message: {e}")
            return False

        return True
