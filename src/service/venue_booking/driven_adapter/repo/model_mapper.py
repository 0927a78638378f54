"""ORM model -> domain entity conversion shared by command and query repos."""

from uuid_utils import UUID

from src.service.venue_booking.domain.entity.booking_entity import Booking, BookingStatus
from src.service.venue_booking.domain.entity.user_entity import UserEntity, UserRole
from src.service.venue_booking.domain.entity.venue_entity import VenueEntity
from src.service.venue_booking.driven_adapter.model.booking_model import BookingModel
from src.service.venue_booking.driven_adapter.model.user_model import UserModel
from src.service.venue_booking.driven_adapter.model.venue_model import VenueModel


def user_model_to_entity(user_model: UserModel) -> UserEntity:
    return UserEntity(
        id=user_model.id,
        username=user_model.username,
        email=user_model.email,
        hashed_password=user_model.hashed_password,
        role=UserRole(user_model.role),
        is_active=user_model.is_active,
        is_verified=user_model.is_verified,
        email_verification_token=user_model.email_verification_token,
        email_verification_expires=user_model.email_verification_expires,
        password_reset_token=user_model.password_reset_token,
        password_reset_expires=user_model.password_reset_expires,
        booking_ids=list(user_model.booking_ids or []),
        created_at=user_model.created_at,
        updated_at=user_model.updated_at,
    )


def venue_model_to_entity(venue_model: VenueModel) -> VenueEntity:
    return VenueEntity(
        id=venue_model.id,
        name=venue_model.name,
        location=venue_model.location,
        capacity=venue_model.capacity,
        description=venue_model.description,
        slug=venue_model.slug,
        created_by=venue_model.created_by,
        created_at=venue_model.created_at,
        updated_at=venue_model.updated_at,
    )


def booking_model_to_entity(booking_model: BookingModel) -> Booking:
    # as_uuid=True columns come back as stdlib uuid.UUID
    return Booking(
        id=UUID(str(booking_model.id)),
        user_id=booking_model.user_id,
        venue_id=booking_model.venue_id,
        date=booking_model.date,
        time=booking_model.time,
        number_of_people=booking_model.number_of_people,
        status=BookingStatus(booking_model.status),
        created_at=booking_model.created_at,
        updated_at=booking_model.updated_at,
    )
