"""Application layer DTOs"""

from src.service.venue_booking.app.dto.paginated_result import PaginatedResult

__all__ = ['PaginatedResult']
