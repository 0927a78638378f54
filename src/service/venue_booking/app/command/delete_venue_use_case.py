from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.venue_booking_metrics import metrics
from src.service.venue_booking.app.command.update_venue_use_case import VENUE_NOT_FOUND_MESSAGE
from src.service.venue_booking.app.interface.i_venue_command_repo import IVenueCommandRepo
from src.service.venue_booking.app.interface.i_venue_list_cache import IVenueListCache


class DeleteVenueUseCase:
    def __init__(
        self, *, venue_command_repo: IVenueCommandRepo, venue_list_cache: IVenueListCache
    ) -> None:
        self.venue_command_repo = venue_command_repo
        self.venue_list_cache = venue_list_cache

    @classmethod
    @inject
    def depends(
        cls,
        venue_command_repo: IVenueCommandRepo = Depends(Provide[Container.venue_command_repo]),
        venue_list_cache: IVenueListCache = Depends(Provide[Container.venue_list_cache]),
    ) -> Self:
        return cls(venue_command_repo=venue_command_repo, venue_list_cache=venue_list_cache)

    @Logger.io
    async def delete(self, *, venue_id: int) -> None:
        if not await self.venue_command_repo.delete(venue_id):
            raise NotFoundError(VENUE_NOT_FOUND_MESSAGE)

        await self.venue_list_cache.invalidate_all()
        metrics.record_venue_cache_invalidation(reason='delete')
        Logger.base.info(f'🗑️ [DELETE-VENUE] {venue_id}')
