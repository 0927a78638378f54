from datetime import date
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace
import uuid_utils

from src.platform.config.di import Container
from src.platform.exception.exceptions import InvalidTimeError, SlotConflictError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.venue_booking_metrics import metrics
from src.service.venue_booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.venue_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.venue_booking.app.interface.i_email_notifier import IEmailNotifier
from src.service.venue_booking.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.venue_booking.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.venue_booking.domain.entity.booking_entity import SLOT_TAKEN_MESSAGE, Booking
from src.service.venue_booking.domain.value_object.booking_slot import BookingSlot


class CreateBookingUseCase:
    """
    Booking admission

    Flow:
    1. Reject slots that do not start strictly in the future (no store access)
    2. Reject slots already held by another booking
    3. Persist the booking and append its id to the owner's booking list
    4. Schedule the confirmation email (never awaited by the request)

    The unique (venue_id, date, time) constraint in the store closes the race
    between step 2 and step 3; the repo maps that violation to SlotConflictError.
    """

    def __init__(
        self,
        *,
        booking_command_repo: IBookingCommandRepo,
        booking_query_repo: IBookingQueryRepo,
        user_command_repo: IUserCommandRepo,
        user_query_repo: IUserQueryRepo,
        email_notifier: IEmailNotifier,
    ) -> None:
        self.booking_command_repo = booking_command_repo
        self.booking_query_repo = booking_query_repo
        self.user_command_repo = user_command_repo
        self.user_query_repo = user_query_repo
        self.email_notifier = email_notifier
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
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        email_notifier: IEmailNotifier = Depends(Provide[Container.email_notifier]),
    ) -> Self:
        return cls(
            booking_command_repo=booking_command_repo,
            booking_query_repo=booking_query_repo,
            user_command_repo=user_command_repo,
            user_query_repo=user_query_repo,
            email_notifier=email_notifier,
        )

    @Logger.io
    async def create_booking(
        self,
        *,
        user_id: int,
        venue_id: int,
        date: date,
        time: str,
        number_of_people: int,
    ) -> Booking:
        """
        Raises:
            ValidationError: malformed time or party size below one
            InvalidTimeError: slot is not in the future
            SlotConflictError: slot already booked
        """
        booking_id = uuid_utils.uuid7()

        with (
            self.tracer.start_as_current_span(
                'use_case.create_booking',
                attributes={
                    'booking.id': str(booking_id),
                    'venue.id': venue_id,
                    'booking.date': date.isoformat(),
                    'booking.time': time,
                },
            ),
            metrics.booking_admission_duration.time(),
        ):
            slot = BookingSlot(venue_id=venue_id, date=date, time=time)
            try:
                booking = Booking.create(
                    id=booking_id,
                    user_id=user_id,
                    slot=slot,
                    number_of_people=number_of_people,
                )
            except InvalidTimeError:
                metrics.record_booking_admission(result='past_time')
                raise

            if await self.booking_query_repo.find_by_slot(slot):
                metrics.record_booking_admission(result='slot_conflict')
                raise SlotConflictError(SLOT_TAKEN_MESSAGE)

            try:
                created = await self.booking_command_repo.create(booking)
            except SlotConflictError:
                metrics.record_booking_admission(result='slot_conflict')
                raise

            await self.user_command_repo.append_booking(
                user_id=user_id, booking_id=str(created.id)
            )
            metrics.record_booking_admission(result='created')
            Logger.base.info(
                f'📝 [CREATE-BOOKING] {created.id} venue={venue_id} '
                f'slot={date.isoformat()} {time} user={user_id}'
            )

            await self._schedule_confirmation(created)
            return created

    async def _schedule_confirmation(self, booking: Booking) -> None:
        # The booking is already committed; a failed owner lookup must not fail the request
        try:
            user_entity = await self.user_query_repo.get_by_id(booking.user_id)
        except Exception as e:
            Logger.base.warning(
                f'⚠️ [CREATE-BOOKING] Owner lookup failed for booking {booking.id}, '
                f'skipping confirmation: {e}'
            )
            metrics.record_email(kind='booking_confirmation', success=False)
            return

        if not user_entity or not user_entity.email:
            Logger.base.warning(
                f'⚠️ [CREATE-BOOKING] No email on file for user {booking.user_id}, '
                'skipping confirmation'
            )
            return

        await self.email_notifier.notify(
            to=user_entity.email,
            subject='Booking Confirmation',
            body=(
                f'Dear {user_entity.username}, your booking has been created successfully '
                f'for {booking.date.isoformat()} at {booking.time}.'
            ),
            kind='booking_confirmation',
        )
