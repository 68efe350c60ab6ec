"""Availability model definitions."""

from pydantic import BaseModel, ConfigDict, Field

# day -> time -> advisor id, exactly as the upstream source returns it.
RawAvailability = dict[str, dict[str, str | int]]


class AdvisorAvailability(BaseModel):
    """Remaining open times for a single advisor."""
    model_config = ConfigDict(populate_by_name=True)

    advisor_id: str = Field(alias='advisorId')
    times: list[str]
