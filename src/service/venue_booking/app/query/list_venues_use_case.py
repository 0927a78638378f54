from typing import Any, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.venue_booking_metrics import metrics
from src.service.venue_booking.app.dto.paginated_result import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    PaginatedResult,
)
from src.service.venue_booking.app.interface.i_venue_list_cache import (
    IVenueListCache,
    build_venue_list_key,
)
from src.service.venue_booking.app.interface.i_venue_query_repo import IVenueQueryRepo


class ListVenuesUseCase:
    """
    Cache-aside venue listing

    Hit returns the cached envelope untouched. Miss queries the store, builds the
    envelope and writes it back (awaited) before returning. Any venue mutation
    drops every cached page, so a hit is never older than the last mutation.
    """

    def __init__(
        self,
        *,
        venue_query_repo: IVenueQueryRepo,
        venue_list_cache: IVenueListCache,
        cache_ttl_seconds: int | None = None,
    ) -> None:
        self.venue_query_repo = venue_query_repo
        self.venue_list_cache = venue_list_cache
        self.cache_ttl_seconds = cache_ttl_seconds or settings.VENUE_CACHE_TTL_SECONDS
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        venue_query_repo: IVenueQueryRepo = Depends(Provide[Container.venue_query_repo]),
        venue_list_cache: IVenueListCache = Depends(Provide[Container.venue_list_cache]),
    ) -> Self:
        return cls(venue_query_repo=venue_query_repo, venue_list_cache=venue_list_cache)

    @Logger.io
    async def list_venues(
        self,
        *,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
        location: str | None = None,
    ) -> dict[str, Any]:
        cache_key = build_venue_list_key(page=page, limit=limit, location=location)

        with self.tracer.start_as_current_span(
            'use_case.list_venues', attributes={'cache.key': cache_key}
        ) as span:
            cached = await self.venue_list_cache.get(cache_key)
            if cached is not None:
                metrics.record_venue_cache(hit=True)
                span.set_attribute('cache.hit', True)
                return cached

            metrics.record_venue_cache(hit=False)
            span.set_attribute('cache.hit', False)

            venues, total_count = await self.venue_query_repo.list_venues(
                page=page, limit=limit, location=location
            )
            envelope = PaginatedResult(
                items=[venue.to_dict() for venue in venues],
                total_count=total_count,
                limit=limit,
                page=page,
            ).to_dict()

            await self.venue_list_cache.set(
                cache_key, envelope, ttl_seconds=self.cache_ttl_seconds
            )
            Logger.base.info(f'🗂️ [LIST-VENUES] cached {cache_key} ({total_count} venues)')
            return envelope
