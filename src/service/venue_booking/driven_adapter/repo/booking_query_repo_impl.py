from typing import Any, AsyncContextManager, Callable, List, Optional, Tuple
import uuid

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_utils import UUID

from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.venue_booking.domain.entity.booking_entity import Booking
from src.service.venue_booking.domain.value_object.booking_slot import BookingSlot
from src.service.venue_booking.driven_adapter.model.booking_model import BookingModel
from src.service.venue_booking.driven_adapter.model.user_model import UserModel
from src.service.venue_booking.driven_adapter.model.venue_model import VenueModel
from src.service.venue_booking.driven_adapter.repo.model_mapper import booking_model_to_entity
from src.service.venue_booking.driven_adapter.repo.sql_filter import contains_pattern


class BookingQueryRepoImpl(IBookingQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @staticmethod
    def _to_booking_dict(db_booking: BookingModel) -> dict[str, Any]:
        # user/venue are selectin-loaded; either may be gone if deleted after booking
        user = db_booking.user
        venue = db_booking.venue
        return {
            'id': str(db_booking.id),
            'user': (
                {'id': user.id, 'username': user.username, 'email': user.email}
                if user
                else None
            ),
            'venue': (
                {'id': venue.id, 'name': venue.name, 'location': venue.location}
                if venue
                else None
            ),
            'date': db_booking.date.isoformat(),
            'time': db_booking.time,
            'number_of_people': db_booking.number_of_people,
            'status': db_booking.status,
            'created_at': db_booking.created_at.isoformat() if db_booking.created_at else None,
            'updated_at': db_booking.updated_at.isoformat() if db_booking.updated_at else None,
        }

    @Logger.io
    async def get_by_id(self, booking_id: UUID) -> Optional[Booking]:
        async with self.session_factory() as session:
            booking_model = await session.get(BookingModel, uuid.UUID(str(booking_id)))
            return booking_model_to_entity(booking_model) if booking_model else None

    @Logger.io
    async def find_by_slot(self, slot: BookingSlot) -> Optional[Booking]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(BookingModel).where(
                    BookingModel.venue_id == slot.venue_id,
                    BookingModel.date == slot.date,
                    BookingModel.time == slot.time,
                )
            )
            booking_model = result.scalar_one_or_none()
            return booking_model_to_entity(booking_model) if booking_model else None

    @Logger.io
    async def list_by_user_with_details(self, user_id: int) -> List[dict[str, Any]]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(BookingModel)
                .where(BookingModel.user_id == user_id)
                .order_by(BookingModel.created_at.desc())
            )
            return [self._to_booking_dict(b) for b in result.scalars().all()]

    @Logger.io
    async def list_with_details(
        self, *, page: int, limit: int, search_text: str | None = None
    ) -> Tuple[List[dict[str, Any]], int]:
        async with self.session_factory() as session:
            stmt = (
                select(BookingModel)
                .outerjoin(UserModel, UserModel.id == BookingModel.user_id)
                .outerjoin(VenueModel, VenueModel.id == BookingModel.venue_id)
            )
            if search_text:
                pattern = contains_pattern(search_text)
                stmt = stmt.where(
                    or_(
                        UserModel.username.ilike(pattern, escape='\\'),
                        UserModel.email.ilike(pattern, escape='\\'),
                        VenueModel.name.ilike(pattern, escape='\\'),
                    )
                )

            total = (
                await session.execute(select(func.count()).select_from(stmt.subquery()))
            ).scalar_one()
            result = await session.execute(
                stmt.order_by(BookingModel.created_at.desc())
                .offset((page - 1) * limit)
                .limit(limit)
            )
            return [self._to_booking_dict(b) for b in result.scalars().all()], total
