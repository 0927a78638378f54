"""Offset pagination envelope shared by venue and admin booking listings."""

import math
from typing import Any, Generic, List, TypeVar

import attrs


DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

_T = TypeVar('_T')


@attrs.define(frozen=True)
class PaginatedResult(Generic[_T]):
    items: List[_T]
    total_count: int
    limit: int
    page: int

    @property
    def total_pages(self) -> int:
        if self.limit <= 0:
            return 0
        return math.ceil(self.total_count / self.limit)

    def to_dict(self) -> dict[str, Any]:
        return {
            'items': list(self.items),
            'total_count': self.total_count,
            'limit': self.limit,
            'page': self.page,
            'total_pages': self.total_pages,
        }
