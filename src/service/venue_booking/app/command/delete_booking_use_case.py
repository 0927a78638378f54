from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace
from uuid_utils import UUID

from src.platform.config.di import Container
from src.platform.exception.exceptions import ForbiddenError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.venue_booking_metrics import metrics
from src.service.venue_booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.venue_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.venue_booking.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.venue_booking.domain.entity.user_entity import UserEntity


BOOKING_NOT_FOUND_MESSAGE = 'Booking not found.'
DELETE_FORBIDDEN_MESSAGE = 'You do not have permission to delete this booking.'


class DeleteBookingUseCase:
    def __init__(
        self,
        *,
        booking_command_repo: IBookingCommandRepo,
        booking_query_repo: IBookingQueryRepo,
        user_command_repo: IUserCommandRepo,
    ) -> None:
        self.booking_command_repo = booking_command_repo
        self.booking_query_repo = booking_query_repo
        self.user_command_repo = user_command_repo
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        booking_command_repo: IBookingCommandRepo = Depends(
            Provide[Container.booking_command_repo]
        ),
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
        user_command_repo: IUserCommandRepo = Depends(Provide[Container.user_command_repo]),
    ) -> Self:
        return cls(
            booking_command_repo=booking_command_repo,
            booking_query_repo=booking_query_repo,
            user_command_repo=user_command_repo,
        )

    @Logger.io
    async def delete_booking(self, *, booking_id: UUID, current_user: UserEntity) -> None:
        """
        Owner or admin may delete; the slot becomes bookable again.

        Raises:
            NotFoundError: booking does not exist
            ForbiddenError: caller is neither the owner nor an admin
        """
        with self.tracer.start_as_current_span(
            'use_case.delete_booking',
            attributes={'booking.id': str(booking_id), 'user.id': current_user.id or 0},
        ):
            booking = await self.booking_query_repo.get_by_id(booking_id)
            if not booking:
                raise NotFoundError(BOOKING_NOT_FOUND_MESSAGE)

            is_owner = booking.is_owned_by(current_user.id)
            if not is_owner and not current_user.is_admin:
                raise ForbiddenError(DELETE_FORBIDDEN_MESSAGE)

            if not await self.booking_command_repo.delete(booking_id):
                # Removed concurrently by another request
                raise NotFoundError(BOOKING_NOT_FOUND_MESSAGE)

            await self.user_command_repo.remove_booking(
                user_id=booking.user_id, booking_id=str(booking_id)
            )
            metrics.record_booking_deleted(caller='owner' if is_owner else 'admin')
            Logger.base.info(
                f'🗑️ [DELETE-BOOKING] {booking_id} removed by user {current_user.id}'
            )
