from typing import Any

from fastapi.testclient import TestClient
import pytest

from src.platform.constant.route_constant import (
    RESERVATION_ADMIN_LIST,
    RESERVATION_BASE,
    VENUE_BASE,
)
from src.service.venue_booking.domain.entity.user_entity import UserEntity
from src.service.venue_booking.driven_adapter.email.logging_email_sender import (
    LoggingEmailSender,
)
from test.in_memory_adapters import InMemoryBookingRepo, InMemoryUserRepo
from test.util_constant import (
    FUTURE_DATE,
    PAST_DATE,
    TEST_BOOKING_TIME,
    TEST_VENUE_CAPACITY,
    TEST_VENUE_DESCRIPTION,
    TEST_VENUE_LOCATION,
    TEST_VENUE_NAME,
)


@pytest.fixture
def venue(client: TestClient, admin_headers: dict[str, str]) -> dict[str, Any]:
    response = client.post(
        VENUE_BASE,
        json={
            'name': TEST_VENUE_NAME,
            'location': TEST_VENUE_LOCATION,
            'capacity': TEST_VENUE_CAPACITY,
            'description': TEST_VENUE_DESCRIPTION,
        },
        headers=admin_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


def _booking_payload(venue_id: int, **overrides: Any) -> dict[str, Any]:
    payload = {
        'venue_id': venue_id,
        'date': FUTURE_DATE,
        'time': TEST_BOOKING_TIME,
        'number_of_people': 4,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def booking(
    client: TestClient, venue: dict[str, Any], user_headers: dict[str, str]
) -> dict[str, Any]:
    response = client.post(
        RESERVATION_BASE, json=_booking_payload(venue['id']), headers=user_headers
    )
    assert response.status_code == 201, response.text
    return response.json()['booking']


class TestCreateBooking:
    def test_create_booking(
        self,
        client: TestClient,
        venue: dict[str, Any],
        test_user: UserEntity,
        user_headers: dict[str, str],
        user_repo: InMemoryUserRepo,
        email_sender: LoggingEmailSender,
    ) -> None:
        response = client.post(
            RESERVATION_BASE, json=_booking_payload(venue['id']), headers=user_headers
        )

        assert response.status_code == 201
        body = response.json()
        assert body['message'] == 'Booking created successfully'
        booking = body['booking']
        assert booking['status'] == 'pending'
        assert booking['user_id'] == test_user.id
        assert booking['date'] == FUTURE_DATE
        assert booking['time'] == TEST_BOOKING_TIME

        assert user_repo.users[test_user.id].booking_ids == [booking['id']]

        mail = email_sender.sent_emails[-1]
        assert mail['to'] == test_user.email
        assert mail['subject'] == 'Booking Confirmation'
        assert f'for {FUTURE_DATE} at {TEST_BOOKING_TIME}' in mail['body']

    def test_iso_timestamp_date_is_accepted(
        self, client: TestClient, venue: dict[str, Any], user_headers: dict[str, str]
    ) -> None:
        response = client.post(
            RESERVATION_BASE,
            json=_booking_payload(venue['id'], date=f'{FUTURE_DATE}T00:00:00.000Z'),
            headers=user_headers,
        )

        assert response.status_code == 201
        assert response.json()['booking']['date'] == FUTURE_DATE

    def test_past_booking_is_rejected(
        self,
        client: TestClient,
        venue: dict[str, Any],
        user_headers: dict[str, str],
        booking_repo: InMemoryBookingRepo,
    ) -> None:
        response = client.post(
            RESERVATION_BASE,
            json=_booking_payload(venue['id'], date=PAST_DATE),
            headers=user_headers,
        )

        assert response.status_code == 400
        assert response.json() == {
            'message': 'Booking cannot be in the past. Please select a future date.'
        }
        assert not booking_repo.bookings

    def test_taken_slot_is_rejected(
        self,
        client: TestClient,
        venue: dict[str, Any],
        booking: dict[str, Any],
        another_user_headers: dict[str, str],
    ) -> None:
        response = client.post(
            RESERVATION_BASE, json=_booking_payload(venue['id']), headers=another_user_headers
        )

        assert response.status_code == 400
        assert response.json() == {
            'message': 'There is already a booking for this venue at the selected time.'
        }

    def test_other_time_same_day_is_allowed(
        self,
        client: TestClient,
        venue: dict[str, Any],
        booking: dict[str, Any],
        another_user_headers: dict[str, str],
    ) -> None:
        response = client.post(
            RESERVATION_BASE,
            json=_booking_payload(venue['id'], time='19:30'),
            headers=another_user_headers,
        )

        assert response.status_code == 201

    @pytest.mark.parametrize('bad_time', ['24:00', '9:30', '18:60', 'noon'])
    def test_malformed_time_is_rejected(
        self,
        client: TestClient,
        venue: dict[str, Any],
        user_headers: dict[str, str],
        bad_time: str,
    ) -> None:
        response = client.post(
            RESERVATION_BASE,
            json=_booking_payload(venue['id'], time=bad_time),
            headers=user_headers,
        )

        assert response.status_code == 400
        assert 'Invalid time format' in response.json()['message']

    def test_zero_people_is_rejected(
        self, client: TestClient, venue: dict[str, Any], user_headers: dict[str, str]
    ) -> None:
        response = client.post(
            RESERVATION_BASE,
            json=_booking_payload(venue['id'], number_of_people=0),
            headers=user_headers,
        )

        assert response.status_code == 400

    def test_requires_authentication(self, client: TestClient, venue: dict[str, Any]) -> None:
        response = client.post(RESERVATION_BASE, json=_booking_payload(venue['id']))

        assert response.status_code == 401


class TestMyBookings:
    def test_empty_list_returns_404(self, client: TestClient, user_headers: dict[str, str]) -> None:
        response = client.get(RESERVATION_BASE, headers=user_headers)

        assert response.status_code == 404
        assert response.json() == {'message': 'No bookings found for this user.'}

    def test_lists_own_bookings_with_details(
        self,
        client: TestClient,
        venue: dict[str, Any],
        booking: dict[str, Any],
        test_user: UserEntity,
        user_headers: dict[str, str],
    ) -> None:
        response = client.get(RESERVATION_BASE, headers=user_headers)

        assert response.status_code == 200
        items = response.json()
        assert len(items) == 1
        assert items[0]['id'] == booking['id']
        assert items[0]['user'] == {
            'id': test_user.id,
            'username': test_user.username,
            'email': test_user.email,
        }
        assert items[0]['venue'] == {
            'id': venue['id'],
            'name': TEST_VENUE_NAME,
            'location': TEST_VENUE_LOCATION,
        }


class TestDeleteBooking:
    def test_owner_deletes_booking_and_slot_is_freed(
        self,
        client: TestClient,
        venue: dict[str, Any],
        booking: dict[str, Any],
        test_user: UserEntity,
        user_headers: dict[str, str],
        another_user_headers: dict[str, str],
        user_repo: InMemoryUserRepo,
    ) -> None:
        response = client.delete(f'{RESERVATION_BASE}/{booking["id"]}', headers=user_headers)

        assert response.status_code == 200
        assert response.json() == {'message': 'Booking deleted successfully.'}
        assert user_repo.users[test_user.id].booking_ids == []

        rebook = client.post(
            RESERVATION_BASE, json=_booking_payload(venue['id']), headers=another_user_headers
        )
        assert rebook.status_code == 201

    def test_non_owner_is_forbidden(
        self,
        client: TestClient,
        booking: dict[str, Any],
        another_user_headers: dict[str, str],
        booking_repo: InMemoryBookingRepo,
    ) -> None:
        response = client.delete(
            f'{RESERVATION_BASE}/{booking["id"]}', headers=another_user_headers
        )

        assert response.status_code == 403
        assert response.json() == {
            'message': 'You do not have permission to delete this booking.'
        }
        assert booking['id'] in booking_repo.bookings

    def test_admin_deletes_and_detaches_from_owner(
        self,
        client: TestClient,
        booking: dict[str, Any],
        test_user: UserEntity,
        admin_headers: dict[str, str],
        user_repo: InMemoryUserRepo,
    ) -> None:
        response = client.delete(f'{RESERVATION_BASE}/{booking["id"]}', headers=admin_headers)

        assert response.status_code == 200
        assert user_repo.users[test_user.id].booking_ids == []

    def test_missing_booking_returns_404(
        self, client: TestClient, user_headers: dict[str, str]
    ) -> None:
        response = client.delete(
            f'{RESERVATION_BASE}/01936d8f-5e73-7c4e-a9c5-123456789abc', headers=user_headers
        )

        assert response.status_code == 404
        assert response.json() == {'message': 'Booking not found.'}

    def test_malformed_id_returns_400(
        self, client: TestClient, user_headers: dict[str, str]
    ) -> None:
        response = client.delete(f'{RESERVATION_BASE}/not-a-uuid', headers=user_headers)

        assert response.status_code == 400


class TestAdminBookings:
    def test_admin_lists_all_bookings(
        self,
        client: TestClient,
        venue: dict[str, Any],
        booking: dict[str, Any],
        another_user_headers: dict[str, str],
        admin_headers: dict[str, str],
    ) -> None:
        client.post(
            RESERVATION_BASE,
            json=_booking_payload(venue['id'], time='20:00'),
            headers=another_user_headers,
        )

        response = client.get(RESERVATION_ADMIN_LIST, headers=admin_headers)

        assert response.status_code == 200
        body = response.json()
        assert body['total_count'] == 2
        assert body['total_pages'] == 1
        # Newest first
        assert body['items'][1]['id'] == booking['id']

    def test_search_text_filters_by_user_or_venue(
        self,
        client: TestClient,
        venue: dict[str, Any],
        booking: dict[str, Any],
        test_user: UserEntity,
        admin_headers: dict[str, str],
    ) -> None:
        by_user = client.get(
            RESERVATION_ADMIN_LIST,
            params={'search_text': test_user.username.upper()},
            headers=admin_headers,
        )
        by_venue = client.get(
            RESERVATION_ADMIN_LIST, params={'search_text': 'grand'}, headers=admin_headers
        )

        assert by_user.json()['total_count'] == 1
        assert by_venue.json()['total_count'] == 1

    def test_no_match_returns_404_with_envelope(
        self,
        client: TestClient,
        booking: dict[str, Any],
        admin_headers: dict[str, str],
    ) -> None:
        response = client.get(
            RESERVATION_ADMIN_LIST, params={'search_text': 'nobody'}, headers=admin_headers
        )

        assert response.status_code == 404
        body = response.json()
        assert body['message'] == 'No bookings found.'
        assert body['items'] == []
        assert body['total_count'] == 0
        assert body['page'] == 1

    def test_regular_user_is_forbidden(
        self, client: TestClient, user_headers: dict[str, str]
    ) -> None:
        assert client.get(RESERVATION_ADMIN_LIST, headers=user_headers).status_code == 403
