from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from pydantic import BaseModel, Field, field_validator

from washbay.models.appointment import Appointment, CustomerDetails
from washbay.models.service import list_services
from washbay.scheduling.results import AvailabilityResult, BookingConfirmation, UnavailableReason
from washbay.scheduling.scheduler import BookingValidationError, Scheduler

router = APIRouter(tags=['bookings'])

MAX_BOOKING_NOTES_LENGTH = 600


class CreateBookingRequest(BaseModel):
    name: str
    phone: str
    email: str | None = None
    address: str
    service: str
    start: datetime = Field(alias='datetime')
    notes: str | None = None

    class Config:
        populate_by_name = True

    @field_validator('name', 'phone', 'address', 'service')
    @classmethod
    def validate_required(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError('This field is required.')
        return normalized

    @field_validator('email')
    @classmethod
    def validate_email(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip().lower() or None

    @field_validator('notes')
    @classmethod
    def validate_notes(cls, value: str | None) -> str | None:
        if value is None:
            return None

        normalized = value.strip()
        if not normalized:
            return None

        if len(normalized) > MAX_BOOKING_NOTES_LENGTH:
            raise ValueError(f'Notes must be {MAX_BOOKING_NOTES_LENGTH} characters or fewer.')

        return normalized

    def customer_details(self) -> CustomerDetails:
        return CustomerDetails(
            name=self.name,
            phone=self.phone,
            address=self.address,
            email=self.email or '',
            notes=self.notes or '',
        )


class AvailabilityResponse(BaseModel):
    available: bool
    message: str
    reason: UnavailableReason | None = None
    suggested_times: list[datetime] = Field(default_factory=list, alias='suggestedTimes')

    class Config:
        populate_by_name = True

    @classmethod
    def from_result(cls, result: AvailabilityResult) -> 'AvailabilityResponse':
        return cls(
            available=result.available,
            message=result.message,
            reason=result.reason,
            suggested_times=result.suggested_times,
        )


class BookingRejectionResponse(BaseModel):
    reason: UnavailableReason
    message: str
    suggested_times: list[datetime] = Field(default_factory=list, alias='suggestedTimes')

    class Config:
        populate_by_name = True


class BookingResponse(BaseModel):
    success: bool = True
    id: str
    duration_minutes: int = Field(alias='durationMinutes')
    service: str
    start: datetime = Field(alias='datetime')
    status: str
    message: str = 'Booking confirmed successfully'

    class Config:
        populate_by_name = True


class BookingSummaryResponse(BaseModel):
    id: str
    name: str
    service: str
    start: datetime = Field(alias='datetime')
    status: str
    created_at: datetime = Field(alias='createdAt')

    class Config:
        populate_by_name = True

    @classmethod
    def from_appointment(cls, appointment: Appointment) -> 'BookingSummaryResponse':
        return cls(
            id=appointment.id,
            name=appointment.customer.name,
            service=appointment.service.name,
            start=appointment.start,
            status=appointment.status,
            created_at=appointment.created_at,
        )


class BookingListResponse(BaseModel):
    count: int
    bookings: list[BookingSummaryResponse]


class ServiceOptionResponse(BaseModel):
    service: str
    duration_minutes: int = Field(alias='durationMinutes')

    class Config:
        populate_by_name = True


def get_scheduler(request: Request) -> Scheduler:
    return request.app.state.scheduler


def raise_for_rejection(result: AvailabilityResult) -> None:
    rejection = BookingRejectionResponse(
        reason=result.reason,
        message=result.message,
        suggested_times=result.suggested_times,
    )
    status_code = (
        status.HTTP_400_BAD_REQUEST
        if result.reason is UnavailableReason.PAST
        else status.HTTP_409_CONFLICT
    )
    raise HTTPException(
        status_code=status_code,
        detail=rejection.model_dump(mode='json', by_alias=True),
    )


@router.get('/check-availability', response_model=AvailabilityResponse)
def check_availability(
    requested_start: datetime = Query(..., alias='datetime'),
    service: str = Query(...),
    scheduler: Scheduler = Depends(get_scheduler),
):
    try:
        result = scheduler.check_availability(requested_start, service)
    except BookingValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return AvailabilityResponse.from_result(result)


@router.post('/bookings', response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
def create_booking(data: CreateBookingRequest, scheduler: Scheduler = Depends(get_scheduler)):
    try:
        result = scheduler.commit(data.start, data.service, data.customer_details())
    except BookingValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    if not isinstance(result, BookingConfirmation):
        raise_for_rejection(result)

    appointment = result.appointment
    return BookingResponse(
        id=result.id,
        duration_minutes=result.duration_minutes,
        service=appointment.service.name,
        start=appointment.start,
        status=appointment.status,
    )


@router.get('/bookings', response_model=BookingListResponse)
def list_bookings(scheduler: Scheduler = Depends(get_scheduler)):
    appointments = scheduler.list()
    return BookingListResponse(
        count=len(appointments),
        bookings=[BookingSummaryResponse.from_appointment(appointment) for appointment in appointments],
    )


@router.get('/services', response_model=list[ServiceOptionResponse])
def list_service_options():
    return [
        ServiceOptionResponse(service=service.name, duration_minutes=service.duration_minutes)
        for service in list_services()
    ]
