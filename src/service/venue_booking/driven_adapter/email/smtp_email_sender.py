from email.mime.text import MIMEText
import smtplib
import ssl

import anyio.to_thread

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import DependencyError
from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.app.interface.i_email_sender import IEmailSender


class SmtpEmailSender(IEmailSender):
    """Plain-text mail over SMTP; the blocking smtplib call runs in a worker thread"""

    def __init__(
        self,
        *,
        host: str = settings.SMTP_HOST,
        port: int = settings.SMTP_PORT,
        username: str = settings.SMTP_USER,
        password: str = settings.SMTP_PASSWORD.get_secret_value(),
        use_tls: bool = settings.SMTP_USE_TLS,
        mail_from: str = settings.MAIL_FROM,
    ) -> None:
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.mail_from = mail_from

    def _send_blocking(self, to: str, subject: str, body: str) -> None:
        message = MIMEText(body, 'plain', 'utf-8')
        message['Subject'] = subject
        message['From'] = self.mail_from
        message['To'] = to

        with smtplib.SMTP(self.host, self.port, timeout=30) as server:
            if self.use_tls:
                server.starttls(context=ssl.create_default_context())
            if self.username:
                server.login(self.username, self.password)
            server.sendmail(self.mail_from, [to], message.as_string())

    @Logger.io
    async def send_email(self, *, to: str, subject: str, body: str) -> None:
        try:
            await anyio.to_thread.run_sync(self._send_blocking, to, subject, body)
        except (smtplib.SMTPException, OSError) as e:
            raise DependencyError(f'SMTP delivery to {to} failed: {e}') from e
        Logger.base.info(f'📧 [EMAIL] Sent "{subject}" to {to} via {self.host}')
