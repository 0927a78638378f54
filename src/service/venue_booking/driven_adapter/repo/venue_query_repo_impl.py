from typing import AsyncContextManager, Callable, List, Optional, Tuple

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.app.interface.i_venue_query_repo import IVenueQueryRepo
from src.service.venue_booking.domain.entity.venue_entity import VenueEntity
from src.service.venue_booking.driven_adapter.model.venue_model import VenueModel
from src.service.venue_booking.driven_adapter.repo.model_mapper import venue_model_to_entity
from src.service.venue_booking.driven_adapter.repo.sql_filter import contains_pattern


class VenueQueryRepoImpl(IVenueQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, venue_id: int) -> Optional[VenueEntity]:
        async with self.session_factory() as session:
            venue_model = await session.get(VenueModel, venue_id)
            return venue_model_to_entity(venue_model) if venue_model else None

    @Logger.io
    async def slug_taken(self, slug: str, *, exclude_venue_id: int | None = None) -> bool:
        async with self.session_factory() as session:
            stmt = select(VenueModel.id).where(VenueModel.slug == slug)
            if exclude_venue_id is not None:
                stmt = stmt.where(VenueModel.id != exclude_venue_id)
            result = await session.execute(stmt.limit(1))
            return result.scalar_one_or_none() is not None

    @Logger.io
    async def list_venues(
        self, *, page: int, limit: int, location: str | None = None
    ) -> Tuple[List[VenueEntity], int]:
        async with self.session_factory() as session:
            stmt = select(VenueModel)
            count_stmt = select(func.count()).select_from(VenueModel)
            if location:
                location_filter = VenueModel.location.ilike(
                    contains_pattern(location), escape='\\'
                )
                stmt = stmt.where(location_filter)
                count_stmt = count_stmt.where(location_filter)

            total = (await session.execute(count_stmt)).scalar_one()
            result = await session.execute(
                stmt.order_by(VenueModel.id).offset((page - 1) * limit).limit(limit)
            )
            return [venue_model_to_entity(m) for m in result.scalars().all()], total
