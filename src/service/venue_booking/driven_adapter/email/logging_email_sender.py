from datetime import datetime, timezone
from typing import List

from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.app.interface.i_email_sender import IEmailSender


class LoggingEmailSender(IEmailSender):
    """Writes mails to the log instead of sending them (no SMTP_HOST configured)"""

    def __init__(self) -> None:
        self.sent_emails: List[dict] = []  # inspected by tests

    async def send_email(self, *, to: str, subject: str, body: str) -> None:
        self.sent_emails.append(
            {'to': to, 'subject': subject, 'body': body, 'sent_at': datetime.now(timezone.utc)}
        )
        Logger.base.info(f'📧 [EMAIL] (not sent) To: {to} | Subject: {subject} | {body}')
