from typing import Any, Callable, Optional

from src.platform.logging.loguru_io import Logger
from src.platform.metrics.venue_booking_metrics import metrics
from src.service.venue_booking.app.interface.i_email_notifier import IEmailNotifier
from src.service.venue_booking.app.interface.i_email_sender import IEmailSender


class EmailNotifierImpl(IEmailNotifier):
    """
    Fire-and-forget mail delivery.

    When the app lifespan has installed a task group in the container the
    send is scheduled on it and the request returns immediately; otherwise
    (scripts, unit tests) it is awaited inline. Delivery errors are logged
    and counted, never raised.
    """

    def __init__(
        self,
        *,
        email_sender: IEmailSender,
        task_group_provider: Callable[[], Optional[Any]],
    ) -> None:
        self.email_sender = email_sender
        self.task_group_provider = task_group_provider

    async def notify(self, *, to: str, subject: str, body: str, kind: str) -> None:
        task_group = self.task_group_provider()
        if task_group is None:
            await self._deliver(to, subject, body, kind)
        else:
            task_group.start_soon(self._deliver, to, subject, body, kind)

    async def _deliver(self, to: str, subject: str, body: str, kind: str) -> None:
        try:
            await self.email_sender.send_email(to=to, subject=subject, body=body)
            metrics.record_email(kind=kind, success=True)
        except Exception as e:
            metrics.record_email(kind=kind, success=False)
            Logger.base.warning(f'⚠️ [EMAIL] {kind} mail to {to} failed: {type(e).__name__}: {e}')
