from threading import Lock

from advisor_booking.core import config
from advisor_booking.models.booking import BookingItem
from advisor_booking.services.availability_client import AvailabilityClient
from advisor_booking.services.booking_service import BookingService
from advisor_booking.services.ledger import BookingLedger

DEMO_BOOKING = BookingItem(name='John Smith', advisor_id='36232', time='2019-04-03T10:00:00-04:00')

_service_lock = Lock()
_booking_service: BookingService | None = None


def build_booking_service() -> BookingService:
    ledger = BookingLedger([DEMO_BOOKING] if config.SEED_DEMO_BOOKING else [])
    return BookingService(AvailabilityClient(), ledger)


def get_booking_service() -> BookingService:
    global _booking_service

    if _booking_service is not None:
        return _booking_service

    with _service_lock:
        if _booking_service is None:
            _booking_service = build_booking_service()

    return _booking_service
