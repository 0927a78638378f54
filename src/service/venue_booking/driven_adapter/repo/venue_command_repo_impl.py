from typing import AsyncContextManager, Callable

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.app.interface.i_venue_command_repo import IVenueCommandRepo
from src.service.venue_booking.domain.entity.venue_entity import VenueEntity
from src.service.venue_booking.driven_adapter.model.venue_model import VenueModel
from src.service.venue_booking.driven_adapter.repo.model_mapper import venue_model_to_entity


class VenueCommandRepoImpl(IVenueCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, venue: VenueEntity) -> VenueEntity:
        async with self.session_factory() as session:
            venue_model = VenueModel(
                name=venue.name,
                location=venue.location,
                capacity=venue.capacity,
                description=venue.description,
                slug=venue.slug,
                created_by=venue.created_by,
            )
            session.add(venue_model)
            try:
                await session.commit()
            except IntegrityError as e:
                # Unique slug index is the last word when two creates race
                await session.rollback()
                raise ConflictError(f'Venue slug {venue.slug!r} already exists') from e
            await session.refresh(venue_model)
            return venue_model_to_entity(venue_model)

    @Logger.io
    async def update(self, venue: VenueEntity) -> VenueEntity:
        async with self.session_factory() as session:
            venue_model = await session.get(VenueModel, venue.id)
            if venue_model is None:
                raise NotFoundError('Venue not found')

            venue_model.name = venue.name
            venue_model.location = venue.location
            venue_model.capacity = venue.capacity
            venue_model.description = venue.description
            venue_model.slug = venue.slug
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise ConflictError(f'Venue slug {venue.slug!r} already exists') from e
            await session.refresh(venue_model)
            return venue_model_to_entity(venue_model)

    @Logger.io
    async def delete(self, venue_id: int) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(delete(VenueModel).where(VenueModel.id == venue_id))
            await session.commit()
            return (result.rowcount or 0) > 0  # type: ignore[attr-defined]
