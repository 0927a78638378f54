"""Venue Booking Domain Value Objects"""

from src.service.venue_booking.domain.value_object.booking_slot import BookingSlot
from src.service.venue_booking.domain.value_object.venue_slug import slugify, with_counter

__all__ = ['BookingSlot', 'slugify', 'with_counter']
