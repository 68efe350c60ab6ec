from collections.abc import Iterable, Iterator

from advisor_booking.models.booking import BookingItem


class BookingLedger:
    """Append-only record of committed bookings.

    Lives for the lifetime of the process: it starts empty (or seeded) and
    nothing is ever persisted, updated or removed.
    """

    def __init__(self, bookings: Iterable[BookingItem] = ()) -> None:
        self._bookings: list[BookingItem] = list(bookings)

    def __len__(self) -> int:
        return len(self._bookings)

    def __iter__(self) -> Iterator[BookingItem]:
        return iter(self.snapshot())

    def append(self, booking: BookingItem) -> None:
        self._bookings.append(booking)

    def snapshot(self) -> tuple[BookingItem, ...]:
        return tuple(self._bookings)
