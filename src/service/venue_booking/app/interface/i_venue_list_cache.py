from abc import ABC, abstractmethod
from typing import Any, Optional


VENUE_LIST_KEY_PREFIX = 'venues'
VENUE_LIST_INDEX_KEY = f'{VENUE_LIST_KEY_PREFIX}:index'


def build_venue_list_key(*, page: int, limit: int, location: str | None) -> str:
    return f'{VENUE_LIST_KEY_PREFIX}:{page}:{limit}:{location or ""}'


class IVenueListCache(ABC):
    """Cache-aside store for venue listing envelopes"""

    @abstractmethod
    async def get(self, key: str) -> Optional[dict[str, Any]]:
        pass

    @abstractmethod
    async def set(self, key: str, value: dict[str, Any], *, ttl_seconds: int) -> None:
        pass

    @abstractmethod
    async def invalidate_all(self) -> int:
        """Drop every cached listing; returns the number of keys removed"""
        pass
