"""Appointment model definitions."""

from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, field_validator, model_validator

from washbay.models.service import ServiceType


def ensure_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class TimeInterval(BaseModel):
    """Half-open span [start, end) occupied by one appointment."""
    start: datetime
    end: datetime

    class Config:
        frozen = True

    @field_validator('start', 'end')
    @classmethod
    def normalize_timezone(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    @model_validator(mode='after')
    def validate_order(self) -> 'TimeInterval':
        if self.end <= self.start:
            raise ValueError('Interval end must be after its start.')
        return self

    @classmethod
    def starting_at(cls, start: datetime, duration_minutes: int) -> 'TimeInterval':
        return cls(start=start, end=start + timedelta(minutes=duration_minutes))


class CustomerDetails(BaseModel):
    """Customer metadata carried through a booking untouched."""
    name: str
    phone: str
    address: str
    email: str = ''
    notes: str = ''

    class Config:
        frozen = True

    @field_validator('name', 'phone', 'address')
    @classmethod
    def validate_required(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError('This field is required.')
        return normalized

    @field_validator('email', 'notes', mode='before')
    @classmethod
    def normalize_optional(cls, value: str | None) -> str:
        if value is None:
            return ''
        return value.strip()


class Appointment(BaseModel):
    """Represents a committed appointment on the bay."""
    id: str
    start: datetime
    service: ServiceType
    customer: CustomerDetails
    created_at: datetime
    status: str = 'confirmed'

    class Config:
        frozen = True

    @field_validator('start', 'created_at')
    @classmethod
    def normalize_timezone(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    @property
    def duration_minutes(self) -> int:
        return self.service.duration_minutes

    @property
    def interval(self) -> TimeInterval:
        return TimeInterval.starting_at(self.start, self.duration_minutes)
