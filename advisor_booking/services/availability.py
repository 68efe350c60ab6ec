"""Filtering and grouping of upstream advisor availability."""

from collections.abc import Iterable, Iterator
from typing import Any

from advisor_booking.models.availability import AdvisorAvailability, RawAvailability
from advisor_booking.models.booking import BookingItem


def is_slot_booked(time: str, advisor_id: Any, bookings: Iterable[BookingItem]) -> bool:
    return any(booking.matches(time, advisor_id) for booking in bookings)


def filter_availability_by_bookings(
    availability: RawAvailability,
    bookings: Iterable[BookingItem],
) -> RawAvailability:
    """Drop every slot claimed by a booking, and any day left with no slots.

    The input mapping is not modified.
    """
    bookings = tuple(bookings)
    filtered: RawAvailability = {}

    for day, entries in availability.items():
        remaining = {
            time: advisor_id
            for time, advisor_id in entries.items()
            if not is_slot_booked(time, advisor_id, bookings)
        }
        if remaining:
            filtered[day] = remaining

    return filtered


def iterate_slots(availability: RawAvailability) -> Iterator[tuple[str, Any]]:
    for entries in availability.values():
        yield from entries.items()


def is_slot_offered(availability: RawAvailability, time: str, advisor_id: Any) -> bool:
    return any(
        slot_time == time and str(slot_advisor_id) == str(advisor_id)
        for slot_time, slot_advisor_id in iterate_slots(availability)
    )


def group_availability_by_advisor(availability: RawAvailability) -> list[AdvisorAvailability]:
    """Group slots by advisor, advisors ordered by id and times ascending.

    Both orderings are fragile on purpose. Advisor ids are compared as
    base-10 integers with Python's int() rules: an id with trailing
    letters such as "12abc" raises ValueError instead of reading as 12,
    while "1_000", surrounding whitespace and non-ASCII digits are all
    accepted. A browser parseInt() would order such ids differently.
    Times are compared as plain strings, which is chronological only while
    every time carries the same UTC offset.
    """
    times_by_advisor: dict[str, list[str]] = {}
    for time, advisor_id in iterate_slots(availability):
        times_by_advisor.setdefault(str(advisor_id), []).append(time)

    return [
        AdvisorAvailability(advisor_id=advisor_id, times=sorted(times))
        for advisor_id, times in sorted(times_by_advisor.items(), key=lambda item: int(item[0], 10))
    ]
