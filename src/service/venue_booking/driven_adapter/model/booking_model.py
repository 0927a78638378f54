import datetime as dt
from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import Date, DateTime, Integer, String, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from src.platform.database.orm_db_setting import Base


if TYPE_CHECKING:
    from src.service.venue_booking.driven_adapter.model.user_model import UserModel
    from src.service.venue_booking.driven_adapter.model.venue_model import VenueModel


SLOT_UNIQUE_CONSTRAINT = 'uq_booking_venue_date_time'


class BookingModel(Base):
    __tablename__ = 'booking'
    __table_args__ = (
        UniqueConstraint('venue_id', 'date', 'time', name=SLOT_UNIQUE_CONSTRAINT),
    )

    id: Mapped[uuid.UUID] = mapped_column(PG_UUID(as_uuid=True), primary_key=True)  # UUID7
    venue_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    time: Mapped[str] = mapped_column(String(5), nullable=False)
    number_of_people: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(20), default='pending', nullable=False)
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
    )
    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    user: Mapped[Optional['UserModel']] = relationship(
        'UserModel',
        primaryjoin='foreign(BookingModel.user_id) == UserModel.id',
        viewonly=True,
        lazy='selectin',
    )
    venue: Mapped[Optional['VenueModel']] = relationship(
        'VenueModel',
        primaryjoin='foreign(BookingModel.venue_id) == VenueModel.id',
        viewonly=True,
        lazy='selectin',
    )
