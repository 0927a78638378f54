from datetime import datetime, timezone
from typing import Any, Optional

import attrs

from src.platform.exception.exceptions import ValidationError
from src.platform.logging.loguru_io import Logger


NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 20
DESCRIPTION_MIN_LENGTH = 10
DESCRIPTION_MAX_LENGTH = 500

UPDATABLE_FIELDS = ('name', 'location', 'capacity', 'description')


@attrs.define
class VenueEntity:
    name: str
    location: str
    capacity: int
    description: str
    created_by: int
    slug: str = ''
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @staticmethod
    def validate_fields(
        *,
        name: str | None = None,
        location: str | None = None,
        capacity: int | None = None,
        description: str | None = None,
    ) -> None:
        if name is not None and not NAME_MIN_LENGTH <= len(name.strip()) <= NAME_MAX_LENGTH:
            raise ValidationError(
                f'Venue name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters.'
            )
        if location is not None and not location.strip():
            raise ValidationError('Venue location is required.')
        if capacity is not None and capacity < 1:
            raise ValidationError('Venue capacity must be at least 1.')
        if description is not None and not (
            DESCRIPTION_MIN_LENGTH <= len(description.strip()) <= DESCRIPTION_MAX_LENGTH
        ):
            raise ValidationError(
                f'Venue description must be between {DESCRIPTION_MIN_LENGTH} '
                f'and {DESCRIPTION_MAX_LENGTH} characters.'
            )

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        name: str,
        location: str,
        capacity: int,
        description: str,
        created_by: int,
        slug: str,
    ) -> 'VenueEntity':
        cls.validate_fields(
            name=name, location=location, capacity=capacity, description=description
        )
        now = datetime.now(timezone.utc)
        return cls(
            name=name.strip(),
            location=location.strip(),
            capacity=capacity,
            description=description.strip(),
            created_by=created_by,
            slug=slug,
            created_at=now,
            updated_at=now,
        )

    @Logger.io
    def apply_update(self, *, slug: str | None = None, **changes: Any) -> 'VenueEntity':
        """Partial update; unknown keys and None values are ignored"""
        fields = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS and v is not None}
        self.validate_fields(**fields)
        if slug is not None:
            fields['slug'] = slug
        return attrs.evolve(self, **fields, updated_at=datetime.now(timezone.utc))

    def to_dict(self) -> dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'location': self.location,
            'capacity': self.capacity,
            'description': self.description,
            'slug': self.slug,
            'created_by': self.created_by,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }
