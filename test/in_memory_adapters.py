"""
In-memory implementations of the repository and cache ports.

API tests override the container providers with these so the HTTP surface can be
exercised without Postgres or Redis.
"""

import copy
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

import attrs
from uuid_utils import UUID

from src.platform.exception.exceptions import ConflictError, NotFoundError, SlotConflictError
from src.service.venue_booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.venue_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.venue_booking.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.venue_booking.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.venue_booking.app.interface.i_venue_command_repo import IVenueCommandRepo
from src.service.venue_booking.app.interface.i_venue_list_cache import IVenueListCache
from src.service.venue_booking.app.interface.i_venue_query_repo import IVenueQueryRepo
from src.service.venue_booking.domain.entity.booking_entity import SLOT_TAKEN_MESSAGE, Booking
from src.service.venue_booking.domain.entity.user_entity import UserEntity
from src.service.venue_booking.domain.entity.venue_entity import VenueEntity
from src.service.venue_booking.domain.value_object.booking_slot import BookingSlot


def _now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryUserRepo(IUserCommandRepo, IUserQueryRepo):
    def __init__(self) -> None:
        self.users: Dict[int, UserEntity] = {}
        self._next_id = 1

    def add(self, user_entity: UserEntity) -> UserEntity:
        """Synchronous seeding helper for tests"""
        stored = attrs.evolve(
            copy.deepcopy(user_entity), id=self._next_id, created_at=_now(), updated_at=_now()
        )
        self.users[self._next_id] = stored
        self._next_id += 1
        return copy.deepcopy(stored)

    async def create(self, user_entity: UserEntity) -> UserEntity:
        for existing in self.users.values():
            if existing.username == user_entity.username or existing.email == user_entity.email:
                raise ConflictError('User already exists')
        return self.add(user_entity)

    async def update(self, user_entity: UserEntity) -> UserEntity:
        if user_entity.id not in self.users:
            raise NotFoundError('User not found.')
        stored = attrs.evolve(copy.deepcopy(user_entity), updated_at=_now())
        self.users[user_entity.id] = stored
        return copy.deepcopy(stored)

    async def append_booking(self, *, user_id: int, booking_id: str) -> None:
        if user_id in self.users:
            self.users[user_id].booking_ids.append(booking_id)

    async def remove_booking(self, *, user_id: int, booking_id: str) -> None:
        if user_id in self.users:
            self.users[user_id].booking_ids = [
                b for b in self.users[user_id].booking_ids if b != booking_id
            ]

    def _find(self, **criteria: Any) -> Optional[UserEntity]:
        for user_entity in self.users.values():
            if all(getattr(user_entity, k) == v for k, v in criteria.items()):
                return copy.deepcopy(user_entity)
        return None

    async def get_by_id(self, user_id: int) -> Optional[UserEntity]:
        return copy.deepcopy(self.users.get(user_id))

    async def get_by_email(self, email: str) -> Optional[UserEntity]:
        return self._find(email=email)

    async def exists_by_username_or_email(self, *, username: str, email: str) -> bool:
        return bool(self._find(username=username) or self._find(email=email))

    async def get_by_verification_token(self, token: str) -> Optional[UserEntity]:
        return self._find(email_verification_token=token)

    async def get_by_password_reset_token(self, token: str) -> Optional[UserEntity]:
        return self._find(password_reset_token=token)


class InMemoryVenueRepo(IVenueCommandRepo, IVenueQueryRepo):
    def __init__(self) -> None:
        self.venues: Dict[int, VenueEntity] = {}
        self.list_calls = 0
        self._next_id = 1

    async def create(self, venue: VenueEntity) -> VenueEntity:
        if any(v.slug == venue.slug for v in self.venues.values()):
            raise ConflictError('Venue with this name already exists')
        stored = attrs.evolve(venue, id=self._next_id)
        self.venues[self._next_id] = stored
        self._next_id += 1
        return stored

    async def update(self, venue: VenueEntity) -> VenueEntity:
        if venue.id not in self.venues:
            raise NotFoundError('Venue not found')
        self.venues[venue.id] = venue
        return venue

    async def delete(self, venue_id: int) -> bool:
        return self.venues.pop(venue_id, None) is not None

    async def get_by_id(self, venue_id: int) -> Optional[VenueEntity]:
        return self.venues.get(venue_id)

    async def slug_taken(self, slug: str, *, exclude_venue_id: int | None = None) -> bool:
        return any(v.slug == slug and v.id != exclude_venue_id for v in self.venues.values())

    async def list_venues(
        self, *, page: int, limit: int, location: str | None = None
    ) -> Tuple[List[VenueEntity], int]:
        self.list_calls += 1
        venues = sorted(self.venues.values(), key=lambda v: v.id or 0)
        if location:
            venues = [v for v in venues if location.lower() in v.location.lower()]
        start = (page - 1) * limit
        return venues[start : start + limit], len(venues)


class InMemoryBookingRepo(IBookingCommandRepo, IBookingQueryRepo):
    def __init__(self, *, user_repo: InMemoryUserRepo, venue_repo: InMemoryVenueRepo) -> None:
        self.bookings: Dict[str, Booking] = {}
        self.user_repo = user_repo
        self.venue_repo = venue_repo

    async def create(self, booking: Booking) -> Booking:
        if any(b.slot == booking.slot for b in self.bookings.values()):
            raise SlotConflictError(SLOT_TAKEN_MESSAGE)
        self.bookings[str(booking.id)] = booking
        return booking

    async def delete(self, booking_id: UUID) -> bool:
        return self.bookings.pop(str(booking_id), None) is not None

    async def get_by_id(self, booking_id: UUID) -> Optional[Booking]:
        return self.bookings.get(str(booking_id))

    async def find_by_slot(self, slot: BookingSlot) -> Optional[Booking]:
        return next((b for b in self.bookings.values() if b.slot == slot), None)

    def _details(self, booking: Booking) -> dict[str, Any]:
        user = self.user_repo.users.get(booking.user_id)
        venue = self.venue_repo.venues.get(booking.venue_id)
        return {
            'id': str(booking.id),
            'user': (
                {'id': user.id, 'username': user.username, 'email': user.email} if user else None
            ),
            'venue': (
                {'id': venue.id, 'name': venue.name, 'location': venue.location}
                if venue
                else None
            ),
            'date': booking.date.isoformat(),
            'time': booking.time,
            'number_of_people': booking.number_of_people,
            'status': str(booking.status),
            'created_at': booking.created_at.isoformat() if booking.created_at else None,
            'updated_at': booking.updated_at.isoformat() if booking.updated_at else None,
        }

    def _newest_first(self) -> List[Booking]:
        return sorted(self.bookings.values(), key=lambda b: b.created_at or _now(), reverse=True)

    async def list_by_user_with_details(self, user_id: int) -> List[dict[str, Any]]:
        return [self._details(b) for b in self._newest_first() if b.user_id == user_id]

    async def list_with_details(
        self, *, page: int, limit: int, search_text: str | None = None
    ) -> Tuple[List[dict[str, Any]], int]:
        rows = [self._details(b) for b in self._newest_first()]
        if search_text:
            needle = search_text.lower()
            rows = [
                row
                for row in rows
                if any(
                    needle in (value or '').lower()
                    for value in (
                        (row['user'] or {}).get('username'),
                        (row['user'] or {}).get('email'),
                        (row['venue'] or {}).get('name'),
                    )
                )
            ]
        start = (page - 1) * limit
        return rows[start : start + limit], len(rows)


class InMemoryVenueListCache(IVenueListCache):
    def __init__(self) -> None:
        self.entries: Dict[str, dict[str, Any]] = {}

    async def get(self, key: str) -> Optional[dict[str, Any]]:
        value = self.entries.get(key)
        return copy.deepcopy(value) if value is not None else None

    async def set(self, key: str, value: dict[str, Any], *, ttl_seconds: int) -> None:
        self.entries[key] = copy.deepcopy(value)

    async def invalidate_all(self) -> int:
        removed = len(self.entries)
        self.entries.clear()
        return removed
