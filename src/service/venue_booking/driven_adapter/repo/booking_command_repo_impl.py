from typing import AsyncContextManager, Callable
import uuid

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_utils import UUID

from src.platform.exception.exceptions import SlotConflictError
from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.venue_booking.domain.entity.booking_entity import SLOT_TAKEN_MESSAGE, Booking
from src.service.venue_booking.driven_adapter.model.booking_model import (
    SLOT_UNIQUE_CONSTRAINT,
    BookingModel,
)
from src.service.venue_booking.driven_adapter.repo.model_mapper import booking_model_to_entity


class BookingCommandRepoImpl(IBookingCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, booking: Booking) -> Booking:
        async with self.session_factory() as session:
            booking_model = BookingModel(
                id=uuid.UUID(str(booking.id)),
                venue_id=booking.venue_id,
                user_id=booking.user_id,
                date=booking.date,
                time=booking.time,
                number_of_people=booking.number_of_people,
                status=booking.status.value,
            )
            session.add(booking_model)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                if SLOT_UNIQUE_CONSTRAINT in str(e.orig):
                    raise SlotConflictError(SLOT_TAKEN_MESSAGE) from e
                raise
            await session.refresh(booking_model)
            return booking_model_to_entity(booking_model)

    @Logger.io
    async def delete(self, booking_id: UUID) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(
                delete(BookingModel).where(BookingModel.id == uuid.UUID(str(booking_id)))
            )
            await session.commit()
            return (result.rowcount or 0) > 0  # type: ignore[attr-defined]
