from typing import Any, Callable, Optional

import orjson
from redis.asyncio import Redis as AsyncRedis

from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.app.interface.i_venue_list_cache import (
    VENUE_LIST_INDEX_KEY,
    IVenueListCache,
)


class VenueListCacheImpl(IVenueListCache):
    """
    Redis cache for venue listing pages.

    Every key written is also added to the ``venues:index`` set so that a
    venue write can drop all listing pages without scanning. Invalidation only
    removes the members it read, so a page indexed meanwhile stays tracked
    for the next invalidation.
    """

    def __init__(self, redis_client_factory: Callable[[], AsyncRedis]) -> None:
        self._redis_client_factory = redis_client_factory

    @property
    def _client(self) -> AsyncRedis:
        return self._redis_client_factory()

    @Logger.io
    async def get(self, key: str) -> Optional[dict[str, Any]]:
        raw = await self._client.get(key)
        if raw is None:
            return None
        return orjson.loads(raw)

    @Logger.io
    async def set(self, key: str, value: dict[str, Any], *, ttl_seconds: int) -> None:
        async with self._client.pipeline(transaction=True) as pipe:
            pipe.set(key, orjson.dumps(value), ex=ttl_seconds)
            pipe.sadd(VENUE_LIST_INDEX_KEY, key)
            await pipe.execute()

    @Logger.io
    async def invalidate_all(self) -> int:
        client = self._client
        keys = await client.smembers(VENUE_LIST_INDEX_KEY)
        if not keys:
            return 0

        async with client.pipeline(transaction=True) as pipe:
            pipe.delete(*keys)
            pipe.srem(VENUE_LIST_INDEX_KEY, *keys)
            await pipe.execute()
        Logger.base.info(f'🧹 [VENUE-CACHE] Invalidated {len(keys)} listing keys')
        return len(keys)
