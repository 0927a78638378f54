"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.venue_booking.app.command import (
    create_booking_use_case,
    create_venue_use_case,
    delete_booking_use_case,
    delete_venue_use_case,
    register_user_use_case,
    request_password_reset_use_case,
    reset_password_use_case,
    update_venue_use_case,
    verify_email_use_case,
)
from src.service.venue_booking.app.query import (
    get_venue_use_case,
    list_admin_bookings_use_case,
    list_my_bookings_use_case,
    list_venues_use_case,
    login_use_case,
    user_query_use_case,
)
from src.service.venue_booking.driving_adapter.http_controller import user_controller
from src.service.venue_booking.driving_adapter.http_controller.auth import role_auth


WIRE_MODULES: list[ModuleType] = [
    register_user_use_case,
    verify_email_use_case,
    request_password_reset_use_case,
    reset_password_use_case,
    login_use_case,
    user_query_use_case,
    create_venue_use_case,
    update_venue_use_case,
    delete_venue_use_case,
    get_venue_use_case,
    list_venues_use_case,
    create_booking_use_case,
    delete_booking_use_case,
    list_my_bookings_use_case,
    list_admin_bookings_use_case,
    user_controller,
    role_auth,
]
