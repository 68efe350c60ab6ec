"""Booking model definitions."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError

# Length of the canonical YYYY-MM-DDTHH:MM:SS+HH:MM form.
BOOKING_TIME_LENGTH = 25

FIELD_ERROR_MESSAGES = {
    'name': 'Invalid name',
    'advisorId': 'Invalid advisor',
    'time': 'Invalid date',
}


class FieldError(BaseModel):
    field: str
    message: str


class BookingRules(BaseModel):
    """Constraints a booking must satisfy before it is admitted to the ledger.

    The time is only checked for length, it is never parsed.
    """
    model_config = ConfigDict(populate_by_name=True)

    name: StrictStr = Field(min_length=1)
    advisor_id: StrictStr = Field(alias='advisorId', min_length=1)
    time: StrictStr = Field(min_length=BOOKING_TIME_LENGTH, max_length=BOOKING_TIME_LENGTH)


class BookingItem(BaseModel):
    """Represents one reservation.

    Construction never fails: whatever the client sent is kept as-is and
    reported by ``field_errors``.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: Any = None
    advisor_id: Any = Field(default=None, alias='advisorId')
    time: Any = None

    def field_errors(self) -> list[FieldError]:
        try:
            BookingRules.model_validate(self.data())
        except ValidationError as exc:
            failed_fields = {error['loc'][0] for error in exc.errors() if error['loc']}
            return [
                FieldError(field=field, message=message)
                for field, message in FIELD_ERROR_MESSAGES.items()
                if field in failed_fields
            ]
        return []

    def matches(self, time: str, advisor_id: Any) -> bool:
        return self.time == time and str(self.advisor_id) == str(advisor_id)

    def data(self) -> dict[str, Any]:
        return {
            'name': self.name,
            'advisorId': self.advisor_id,
            'time': self.time,
        }
