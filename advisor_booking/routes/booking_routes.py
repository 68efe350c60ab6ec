from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from advisor_booking.dependencies import get_booking_service
from advisor_booking.models.booking import BookingItem, FieldError
from advisor_booking.services.booking_service import BookingService, BookingStatus

router = APIRouter(tags=['bookings'])


class BookingListResponse(BaseModel):
    bookings: list[BookingItem]


class BookingErrorResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    error: bool = True
    message: str
    field_errors: list[FieldError] | None = Field(default=None, alias='fieldErrors')


@router.get('', response_model=BookingListResponse)
async def list_bookings(service: BookingService = Depends(get_booking_service)):
    return {'bookings': service.list_bookings()}


@router.post(
    '',
    response_model=BookingItem,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_200_OK: {'model': BookingErrorResponse}},
)
async def create_booking(
    payload: Any = Body(default=None),
    service: BookingService = Depends(get_booking_service),
):
    # Non-object bodies become a booking with every field missing.
    booking = BookingItem.model_validate(payload if isinstance(payload, dict) else {})
    result = await service.create_booking(booking)

    if result.status is BookingStatus.REJECTED:
        error = BookingErrorResponse(message=result.message, field_errors=result.field_errors)
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=error.model_dump(mode='json', by_alias=True, exclude_none=True),
        )

    return result.booking.data()
