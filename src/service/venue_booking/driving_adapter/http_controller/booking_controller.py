from typing import Any, List, Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse
from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.platform.types.uuid7_utils_types import UtilsUUID7
from src.service.venue_booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.venue_booking.app.command.delete_booking_use_case import DeleteBookingUseCase
from src.service.venue_booking.app.dto.paginated_result import DEFAULT_LIMIT, DEFAULT_PAGE
from src.service.venue_booking.app.query.list_admin_bookings_use_case import (
    ListAdminBookingsUseCase,
)
from src.service.venue_booking.app.query.list_my_bookings_use_case import ListMyBookingsUseCase
from src.service.venue_booking.domain.entity.user_entity import UserEntity
from src.service.venue_booking.driving_adapter.http_controller.auth.role_auth import (
    get_current_user,
    require_admin,
)
from src.service.venue_booking.driving_adapter.http_controller.schema.booking_schema import (
    AdminBookingListResponse,
    BookingCreateRequest,
    BookingCreateResponse,
    BookingResponse,
    BookingWithDetailsResponse,
)
from src.service.venue_booking.driving_adapter.http_controller.schema.user_schema import (
    MessageResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.post('', response_model=BookingCreateResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_booking(
    request: BookingCreateRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
) -> BookingCreateResponse:
    with tracer.start_as_current_span('controller.create_booking') as span:
        span.set_attribute('venue_id', request.venue_id)
        span.set_attribute('user_id', current_user.id or 0)

        booking = await use_case.create_booking(
            user_id=current_user.id or 0,
            venue_id=request.venue_id,
            date=request.date,
            time=request.time,
            number_of_people=request.number_of_people,
        )

        return BookingCreateResponse(
            message='Booking created successfully',
            booking=BookingResponse(
                id=booking.id,
                user_id=booking.user_id,
                venue_id=booking.venue_id,
                date=booking.date,
                time=booking.time,
                number_of_people=booking.number_of_people,
                status=booking.status,
                created_at=booking.created_at,
                updated_at=booking.updated_at,
            ),
        )


@router.get('', response_model=List[BookingWithDetailsResponse])
@Logger.io
async def list_my_bookings(
    current_user: UserEntity = Depends(get_current_user),
    use_case: ListMyBookingsUseCase = Depends(ListMyBookingsUseCase.depends),
) -> list[dict[str, Any]]:
    return await use_case.list_my_bookings(user_id=current_user.id or 0)


@router.get('/admin', response_model=AdminBookingListResponse)
@Logger.io
async def list_all_bookings(
    page: int = Query(DEFAULT_PAGE, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=100),
    search_text: Optional[str] = Query(None),
    current_user: UserEntity = Depends(require_admin),
    use_case: ListAdminBookingsUseCase = Depends(ListAdminBookingsUseCase.depends),
) -> Any:
    result = await use_case.list_bookings(page=page, limit=limit, search_text=search_text)
    envelope = result.to_dict()
    if not result.items:
        # Empty page still carries the envelope so clients can render pagination
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={'message': 'No bookings found.', **envelope},
        )
    return envelope


@router.delete('/{booking_id}', response_model=MessageResponse)
@Logger.io
async def delete_booking(
    booking_id: UtilsUUID7,
    current_user: UserEntity = Depends(get_current_user),
    use_case: DeleteBookingUseCase = Depends(DeleteBookingUseCase.depends),
) -> MessageResponse:
    await use_case.delete_booking(booking_id=booking_id, current_user=current_user)
    return MessageResponse(message='Booking deleted successfully.')
