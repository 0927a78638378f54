"""Application layer interfaces (Ports)"""

from src.service.venue_booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.venue_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.venue_booking.app.interface.i_email_notifier import IEmailNotifier
from src.service.venue_booking.app.interface.i_email_sender import IEmailSender
from src.service.venue_booking.app.interface.i_password_hasher import IPasswordHasher
from src.service.venue_booking.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.venue_booking.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.venue_booking.app.interface.i_venue_command_repo import IVenueCommandRepo
from src.service.venue_booking.app.interface.i_venue_list_cache import IVenueListCache
from src.service.venue_booking.app.interface.i_venue_query_repo import IVenueQueryRepo

__all__ = [
    'IBookingCommandRepo',
    'IBookingQueryRepo',
    'IEmailNotifier',
    'IEmailSender',
    'IPasswordHasher',
    'IUserCommandRepo',
    'IUserQueryRepo',
    'IVenueCommandRepo',
    'IVenueListCache',
    'IVenueQueryRepo',
]
