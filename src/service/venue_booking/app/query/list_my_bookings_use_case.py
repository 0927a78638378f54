from typing import Any, List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.app.interface.i_booking_query_repo import IBookingQueryRepo


class ListMyBookingsUseCase:
    def __init__(self, *, booking_query_repo: IBookingQueryRepo) -> None:
        self.booking_query_repo = booking_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
    ) -> Self:
        return cls(booking_query_repo=booking_query_repo)

    @Logger.io
    async def list_my_bookings(self, *, user_id: int) -> List[dict[str, Any]]:
        bookings = await self.booking_query_repo.list_by_user_with_details(user_id)
        if not bookings:
            raise NotFoundError('No bookings found for this user.')
        return bookings
