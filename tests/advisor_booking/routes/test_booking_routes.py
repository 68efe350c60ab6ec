import httpx
import pytest
from fastapi.testclient import TestClient

from advisor_booking.dependencies import get_booking_service
from advisor_booking.main import app
from advisor_booking.models.booking import BookingItem
from advisor_booking.services.availability_client import AvailabilityClient
from advisor_booking.services.booking_service import BookingService
from advisor_booking.services.ledger import BookingLedger

OPEN_TIME = '2019-04-04T11:30:00-04:00'
BOOKED_TIME = '2019-04-03T10:00:00-04:00'
UPSTREAM_AVAILABILITY = {
    '2019-04-03': {BOOKED_TIME: '36232'},
    '2019-04-04': {OPEN_TIME: 417239},
}


class Upstream:
    def __init__(self) -> None:
        self.status_code = 200
        self.payload = UPSTREAM_AVAILABILITY
        self.calls = 0

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls += 1
        if self.status_code != 200:
            return httpx.Response(self.status_code)
        return httpx.Response(200, json=self.payload)


@pytest.fixture
def upstream() -> Upstream:
    return Upstream()


@pytest.fixture
def service(upstream: Upstream) -> BookingService:
    client = AvailabilityClient(url='https://advisors.example/availability', transport=httpx.MockTransport(upstream))
    ledger = BookingLedger([BookingItem(name='John Smith', advisor_id='36232', time=BOOKED_TIME)])
    return BookingService(client, ledger)


@pytest.fixture
def api(service: BookingService):
    app.dependency_overrides[get_booking_service] = lambda: service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_list_bookings_returns_ledger(api: TestClient) -> None:
    response = api.get('/bookings')

    assert response.status_code == 200
    assert response.json() == {
        'bookings': [{'name': 'John Smith', 'advisorId': '36232', 'time': BOOKED_TIME}],
    }


def test_create_booking_returns_created_record(api: TestClient, service: BookingService) -> None:
    response = api.post('/bookings', json={'name': 'Ada', 'advisorId': '417239', 'time': OPEN_TIME})

    assert response.status_code == 201
    assert response.json() == {'name': 'Ada', 'advisorId': '417239', 'time': OPEN_TIME}
    assert len(service.ledger) == 2


def test_create_booking_reports_field_errors_with_ok_status(api: TestClient, upstream: Upstream) -> None:
    response = api.post('/bookings', json={'name': '', 'advisorId': 417239, 'time': OPEN_TIME})

    assert response.status_code == 200
    assert response.json() == {
        'error': True,
        'message': 'Field errors',
        'fieldErrors': [
            {'field': 'name', 'message': 'Invalid name'},
            {'field': 'advisorId', 'message': 'Invalid advisor'},
        ],
    }
    assert upstream.calls == 0


def test_create_booking_treats_missing_fields_as_invalid(api: TestClient) -> None:
    response = api.post('/bookings', json={})

    assert response.status_code == 200
    assert [error['field'] for error in response.json()['fieldErrors']] == ['name', 'advisorId', 'time']


def test_create_booking_reports_unavailable_slot(api: TestClient, service: BookingService) -> None:
    response = api.post('/bookings', json={'name': 'Ada', 'advisorId': '36232', 'time': BOOKED_TIME})

    assert response.status_code == 200
    assert response.json() == {'error': True, 'message': 'Booking unavailable'}
    assert len(service.ledger) == 1


def test_create_booking_hides_upstream_failure(api: TestClient, upstream: Upstream, service: BookingService) -> None:
    upstream.status_code = 502

    response = api.post('/bookings', json={'name': 'Ada', 'advisorId': '417239', 'time': OPEN_TIME})

    assert response.status_code == 500
    assert response.text == 'API Error.'
    assert len(service.ledger) == 1


def test_booked_slot_is_removed_from_availability(api: TestClient) -> None:
    api.post('/bookings', json={'name': 'Ada', 'advisorId': '417239', 'time': OPEN_TIME})

    response = api.get('/availability')

    assert response.status_code == 200
    assert response.json() == {'availability': []}


@pytest.mark.parametrize('body', [[], 'Ada', 42])
def test_create_booking_treats_non_object_body_as_empty(api: TestClient, upstream: Upstream, body) -> None:
    response = api.post('/bookings', json=body)

    assert response.status_code == 200
    assert response.json()['message'] == 'Field errors'
    assert [error['field'] for error in response.json()['fieldErrors']] == ['name', 'advisorId', 'time']
    assert upstream.calls == 0


def test_create_booking_without_body_reports_field_errors(api: TestClient) -> None:
    response = api.post('/bookings')

    assert response.status_code == 200
    assert [error['field'] for error in response.json()['fieldErrors']] == ['name', 'advisorId', 'time']
