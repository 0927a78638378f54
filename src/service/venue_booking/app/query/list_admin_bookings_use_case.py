from typing import Any, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.app.dto.paginated_result import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    PaginatedResult,
)
from src.service.venue_booking.app.interface.i_booking_query_repo import IBookingQueryRepo


class ListAdminBookingsUseCase:
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
    async def list_bookings(
        self,
        *,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
        search_text: str | None = None,
    ) -> PaginatedResult[dict[str, Any]]:
        """Newest first; the caller decides how to report an empty page"""
        items, total_count = await self.booking_query_repo.list_with_details(
            page=page, limit=limit, search_text=search_text or None
        )
        return PaginatedResult(items=items, total_count=total_count, limit=limit, page=page)
