import logging
import smtplib
import ssl
from email.message import EmailMessage

logger = logging.getLogger(__name__)


class MailDeliveryError(Exception):
    """Ошибка доставки письма через SMTP"""


class SMTPMailer:
    """Отправка писем через SMTP-сервер с учётной записью сервиса"""

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        use_ssl: bool = False,
        timeout: float = 10.0
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.use_ssl = use_ssl
        self.timeout = timeout

    def _connect(self, context: ssl.SSLContext) -> smtplib.SMTP:
        if self.use_ssl:
            return smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout, context=context)
        return smtplib.SMTP(self.host, self.port, timeout=self.timeout)

    def send(self, message: EmailMessage) -> None:
        """Однократная отправка письма, без повторных попыток"""
        try:
            context = ssl.create_default_context()
            with self._connect(context) as client:
                if not self.use_ssl:
                    client.starttls(context=context)
                client.login(self.username, self.password)
                client.send_message(message)
        except (smtplib.SMTPException, OSError) as e:
            raise MailDeliveryError(f"Failed to deliver mail via {self.host}:{self.port}: {e}") from e

        logger.info(f"Mail '{message['Subject']}' delivered via {self.host}")
