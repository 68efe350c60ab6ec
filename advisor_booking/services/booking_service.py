import logging
from enum import Enum

from pydantic import BaseModel

from advisor_booking.models.availability import AdvisorAvailability
from advisor_booking.models.booking import BookingItem, FieldError
from advisor_booking.services.availability import (
    filter_availability_by_bookings,
    group_availability_by_advisor,
    is_slot_offered,
)
from advisor_booking.services.availability_client import AvailabilityClient
from advisor_booking.services.ledger import BookingLedger

logger = logging.getLogger(__name__)

FIELD_ERRORS_MESSAGE = 'Field errors'
BOOKING_UNAVAILABLE_MESSAGE = 'Booking unavailable'


class BookingStatus(str, Enum):
    COMMITTED = 'committed'
    REJECTED = 'rejected'


class BookingResult(BaseModel):
    status: BookingStatus
    booking: BookingItem
    message: str | None = None
    field_errors: list[FieldError] | None = None


class BookingService:
    """Owns the booking ledger and checks writes against fresh availability.

    Upstream failures surface as UpstreamError from the fetch; rejections
    are returned as a BookingResult instead of being raised.
    """

    def __init__(self, client: AvailabilityClient, ledger: BookingLedger | None = None) -> None:
        self._client = client
        self._ledger = ledger if ledger is not None else BookingLedger()

    @property
    def ledger(self) -> tuple[BookingItem, ...]:
        return self._ledger.snapshot()

    def list_bookings(self) -> list[dict]:
        return [booking.data() for booking in self._ledger]

    async def get_availability(self) -> list[AdvisorAvailability]:
        availability = await self._client.fetch()
        return group_availability_by_advisor(
            filter_availability_by_bookings(availability, self._ledger.snapshot())
        )

    async def create_booking(self, booking: BookingItem) -> BookingResult:
        field_errors = booking.field_errors()
        if field_errors:
            logger.info('Rejected booking with invalid fields: %s', [error.field for error in field_errors])
            return BookingResult(
                status=BookingStatus.REJECTED,
                booking=booking,
                message=FIELD_ERRORS_MESSAGE,
                field_errors=field_errors,
            )

        availability = await self._client.fetch()

        # Nothing below awaits, so the check and the append run back to back.
        remaining = filter_availability_by_bookings(availability, self._ledger.snapshot())
        # Not offered covers both a slot already in the ledger and one the upstream never listed.
        if not is_slot_offered(remaining, booking.time, booking.advisor_id):
            logger.info('Booking unavailable for advisor %s at %s', booking.advisor_id, booking.time)
            return BookingResult(
                status=BookingStatus.REJECTED,
                booking=booking,
                message=BOOKING_UNAVAILABLE_MESSAGE,
            )

        self._ledger.append(booking)
        logger.info('Booked advisor %s at %s', booking.advisor_id, booking.time)
        return BookingResult(status=BookingStatus.COMMITTED, booking=booking)
