from abc import ABC, abstractmethod


class IEmailNotifier(ABC):
    """Best-effort email delivery: never raises into the caller"""

    @abstractmethod
    async def notify(self, *, to: str, subject: str, body: str, kind: str) -> None:
        pass
