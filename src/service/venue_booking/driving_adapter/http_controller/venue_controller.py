from typing import Any, Optional

from fastapi import APIRouter, Depends, Query, status
from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.app.command.create_venue_use_case import CreateVenueUseCase
from src.service.venue_booking.app.command.delete_venue_use_case import DeleteVenueUseCase
from src.service.venue_booking.app.command.update_venue_use_case import UpdateVenueUseCase
from src.service.venue_booking.app.dto.paginated_result import DEFAULT_LIMIT, DEFAULT_PAGE
from src.service.venue_booking.app.query.get_venue_use_case import GetVenueUseCase
from src.service.venue_booking.app.query.list_venues_use_case import ListVenuesUseCase
from src.service.venue_booking.domain.entity.user_entity import UserEntity
from src.service.venue_booking.driving_adapter.http_controller.auth.role_auth import (
    require_admin,
)
from src.service.venue_booking.driving_adapter.http_controller.schema.user_schema import (
    MessageResponse,
)
from src.service.venue_booking.driving_adapter.http_controller.schema.venue_schema import (
    VenueCreateRequest,
    VenueListResponse,
    VenueResponse,
    VenueUpdateRequest,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.post('', response_model=VenueResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_venue(
    request: VenueCreateRequest,
    current_user: UserEntity = Depends(require_admin),
    use_case: CreateVenueUseCase = Depends(CreateVenueUseCase.depends),
) -> VenueResponse:
    venue = await use_case.create(
        name=request.name,
        location=request.location,
        capacity=request.capacity,
        description=request.description,
        created_by=current_user.id or 0,
    )
    return VenueResponse.model_validate(venue)


@router.get('', response_model=VenueListResponse)
@Logger.io
async def list_venues(
    page: int = Query(DEFAULT_PAGE, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=100),
    location: Optional[str] = Query(None),
    use_case: ListVenuesUseCase = Depends(ListVenuesUseCase.depends),
) -> dict[str, Any]:
    with tracer.start_as_current_span('controller.list_venues') as span:
        span.set_attribute('page', page)
        span.set_attribute('limit', limit)
        return await use_case.list_venues(page=page, limit=limit, location=location or None)


@router.get('/{venue_id}', response_model=VenueResponse)
@Logger.io
async def get_venue(
    venue_id: int,
    use_case: GetVenueUseCase = Depends(GetVenueUseCase.depends),
) -> VenueResponse:
    return VenueResponse.model_validate(await use_case.get_venue(venue_id=venue_id))


@router.put('/{venue_id}', response_model=VenueResponse)
@Logger.io
async def update_venue(
    venue_id: int,
    request: VenueUpdateRequest,
    current_user: UserEntity = Depends(require_admin),
    use_case: UpdateVenueUseCase = Depends(UpdateVenueUseCase.depends),
) -> VenueResponse:
    venue = await use_case.update(venue_id=venue_id, **request.model_dump(exclude_unset=True))
    return VenueResponse.model_validate(venue)


@router.delete('/{venue_id}', response_model=MessageResponse)
@Logger.io
async def delete_venue(
    venue_id: int,
    current_user: UserEntity = Depends(require_admin),
    use_case: DeleteVenueUseCase = Depends(DeleteVenueUseCase.depends),
) -> MessageResponse:
    await use_case.delete(venue_id=venue_id)
    return MessageResponse(message='Venue deleted successfully')
