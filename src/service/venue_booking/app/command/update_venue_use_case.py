from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.venue_booking_metrics import metrics
from src.service.venue_booking.app.command.venue_slug_resolver import resolve_unique_slug
from src.service.venue_booking.app.interface.i_venue_command_repo import IVenueCommandRepo
from src.service.venue_booking.app.interface.i_venue_list_cache import IVenueListCache
from src.service.venue_booking.app.interface.i_venue_query_repo import IVenueQueryRepo
from src.service.venue_booking.domain.entity.venue_entity import VenueEntity


VENUE_NOT_FOUND_MESSAGE = 'Venue not found'


class UpdateVenueUseCase:
    def __init__(
        self,
        *,
        venue_command_repo: IVenueCommandRepo,
        venue_query_repo: IVenueQueryRepo,
        venue_list_cache: IVenueListCache,
    ) -> None:
        self.venue_command_repo = venue_command_repo
        self.venue_query_repo = venue_query_repo
        self.venue_list_cache = venue_list_cache
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        venue_command_repo: IVenueCommandRepo = Depends(Provide[Container.venue_command_repo]),
        venue_query_repo: IVenueQueryRepo = Depends(Provide[Container.venue_query_repo]),
        venue_list_cache: IVenueListCache = Depends(Provide[Container.venue_list_cache]),
    ) -> Self:
        return cls(
            venue_command_repo=venue_command_repo,
            venue_query_repo=venue_query_repo,
            venue_list_cache=venue_list_cache,
        )

    @Logger.io
    async def update(
        self,
        *,
        venue_id: int,
        name: str | None = None,
        location: str | None = None,
        capacity: int | None = None,
        description: str | None = None,
    ) -> VenueEntity:
        """Partial update; a new name re-derives the slug."""
        with self.tracer.start_as_current_span(
            'use_case.update_venue', attributes={'venue.id': venue_id}
        ):
            venue = await self.venue_query_repo.get_by_id(venue_id)
            if not venue:
                raise NotFoundError(VENUE_NOT_FOUND_MESSAGE)

            slug = None
            if name is not None and name != venue.name:
                slug = await resolve_unique_slug(
                    name, self.venue_query_repo, exclude_venue_id=venue_id
                )

            updated = await self.venue_command_repo.update(
                venue.apply_update(
                    slug=slug,
                    name=name,
                    location=location,
                    capacity=capacity,
                    description=description,
                )
            )

            await self.venue_list_cache.invalidate_all()
            metrics.record_venue_cache_invalidation(reason='update')
            Logger.base.info(f'✏️ [UPDATE-VENUE] {updated.id} ({updated.slug})')
            return updated
