from fastapi import APIRouter, Depends
from pydantic import BaseModel

from advisor_booking.dependencies import get_booking_service
from advisor_booking.models.availability import AdvisorAvailability
from advisor_booking.services.booking_service import BookingService

router = APIRouter(tags=['availability'])


class AvailabilityResponse(BaseModel):
    availability: list[AdvisorAvailability]


@router.get('', response_model=AvailabilityResponse)
async def get_availability(service: BookingService = Depends(get_booking_service)):
    return AvailabilityResponse(availability=await service.get_availability())
