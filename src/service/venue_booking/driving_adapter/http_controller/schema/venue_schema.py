import datetime as dt
from typing import List, Optional

from pydantic import BaseModel, Field


class VenueCreateRequest(BaseModel):
    name: str = Field(..., min_length=3, max_length=20)
    location: str = Field(..., min_length=1)
    capacity: int = Field(..., ge=1)
    description: str = Field(..., min_length=10, max_length=500)

    model_config = {
        'json_schema_extra': {
            'example': {
                'name': 'Grand Hall',
                'location': 'Taipei',
                'capacity': 200,
                'description': 'Ballroom with stage and sound system',
            }
        }
    }


class VenueUpdateRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=3, max_length=20)
    location: Optional[str] = Field(None, min_length=1)
    capacity: Optional[int] = Field(None, ge=1)
    description: Optional[str] = Field(None, min_length=10, max_length=500)

    model_config = {'json_schema_extra': {'example': {'capacity': 250}}}


class VenueResponse(BaseModel):
    id: int
    name: str
    location: str
    capacity: int
    description: str
    slug: str
    created_by: int
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None

    model_config = {
        'from_attributes': True,
        'json_schema_extra': {
            'example': {
                'id': 1,
                'name': 'Grand Hall',
                'location': 'Taipei',
                'capacity': 200,
                'description': 'Ballroom with stage and sound system',
                'slug': 'grand-hall',
                'created_by': 1,
                'created_at': '2025-01-10T10:30:00+00:00',
                'updated_at': '2025-01-10T10:30:00+00:00',
            }
        },
    }


class VenueListResponse(BaseModel):
    items: List[VenueResponse]
    total_count: int
    limit: int
    page: int
    total_pages: int
