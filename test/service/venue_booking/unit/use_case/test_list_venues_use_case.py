from unittest.mock import AsyncMock, Mock

import pytest

from src.service.venue_booking.app.query.list_venues_use_case import ListVenuesUseCase
from src.service.venue_booking.domain.entity.venue_entity import VenueEntity


@pytest.fixture
def venue() -> VenueEntity:
    return VenueEntity(
        id=1,
        name='Grand Hall',
        location='Taipei',
        capacity=200,
        description='Ballroom with stage',
        created_by=1,
        slug='grand-hall',
    )


@pytest.fixture
def mock_venue_query_repo(venue: VenueEntity) -> Mock:
    repo = AsyncMock()
    repo.list_venues.return_value = ([venue], 1)
    return repo


@pytest.fixture
def mock_venue_list_cache() -> Mock:
    cache = AsyncMock()
    cache.get.return_value = None
    return cache


@pytest.fixture
def list_venues_use_case(
    mock_venue_query_repo: Mock, mock_venue_list_cache: Mock
) -> ListVenuesUseCase:
    return ListVenuesUseCase(
        venue_query_repo=mock_venue_query_repo,
        venue_list_cache=mock_venue_list_cache,
        cache_ttl_seconds=60,
    )


@pytest.mark.unit
class TestListVenuesUseCase:
    @pytest.mark.asyncio
    async def test_miss_queries_store_and_writes_back(
        self,
        list_venues_use_case: ListVenuesUseCase,
        mock_venue_query_repo: Mock,
        mock_venue_list_cache: Mock,
    ) -> None:
        # Act
        result = await list_venues_use_case.list_venues(page=2, limit=5, location='Taipei')

        # Assert
        mock_venue_query_repo.list_venues.assert_awaited_once_with(
            page=2, limit=5, location='Taipei'
        )
        assert result['total_count'] == 1
        assert result['total_pages'] == 1
        assert result['items'][0]['slug'] == 'grand-hall'
        mock_venue_list_cache.set.assert_awaited_once_with(
            'venues:2:5:Taipei', result, ttl_seconds=60
        )

    @pytest.mark.asyncio
    async def test_hit_returns_cached_envelope(
        self,
        list_venues_use_case: ListVenuesUseCase,
        mock_venue_query_repo: Mock,
        mock_venue_list_cache: Mock,
    ) -> None:
        # Arrange
        cached = {'items': [], 'total_count': 0, 'page': 1, 'limit': 10, 'total_pages': 0}
        mock_venue_list_cache.get.return_value = cached

        # Act
        result = await list_venues_use_case.list_venues()

        # Assert
        assert result is cached
        mock_venue_list_cache.get.assert_awaited_once_with('venues:1:10:')
        mock_venue_query_repo.list_venues.assert_not_awaited()
        mock_venue_list_cache.set.assert_not_awaited()
