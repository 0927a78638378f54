from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.venue_booking_metrics import metrics
from src.service.venue_booking.app.command.venue_slug_resolver import resolve_unique_slug
from src.service.venue_booking.app.interface.i_venue_command_repo import IVenueCommandRepo
from src.service.venue_booking.app.interface.i_venue_list_cache import IVenueListCache
from src.service.venue_booking.app.interface.i_venue_query_repo import IVenueQueryRepo
from src.service.venue_booking.domain.entity.venue_entity import VenueEntity


class CreateVenueUseCase:
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
    async def create(
        self,
        *,
        name: str,
        location: str,
        capacity: int,
        description: str,
        created_by: int,
    ) -> VenueEntity:
        with self.tracer.start_as_current_span(
            'use_case.create_venue', attributes={'venue.name': name}
        ):
            VenueEntity.validate_fields(
                name=name, location=location, capacity=capacity, description=description
            )
            slug = await resolve_unique_slug(name, self.venue_query_repo)
            venue = VenueEntity.create(
                name=name,
                location=location,
                capacity=capacity,
                description=description,
                created_by=created_by,
                slug=slug,
            )
            created = await self.venue_command_repo.create(venue)

            # Any listing page may now be stale
            removed = await self.venue_list_cache.invalidate_all()
            metrics.record_venue_cache_invalidation(reason='create')
            Logger.base.info(
                f'🏟️ [CREATE-VENUE] {created.id} ({created.slug}), dropped {removed} cached pages'
            )
            return created
