"""Typed outcomes returned by the scheduler instead of raising."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from washbay.models.appointment import Appointment


class UnavailableReason(str, Enum):
    PAST = 'past'
    CONFLICT = 'conflict'


class AvailabilityResult(BaseModel):
    available: bool
    message: str
    reason: UnavailableReason | None = None
    suggested_times: list[datetime] = Field(default_factory=list)

    class Config:
        frozen = True

    @classmethod
    def free(cls) -> 'AvailabilityResult':
        return cls(available=True, message='Time slot is available')

    @classmethod
    def in_the_past(cls) -> 'AvailabilityResult':
        return cls(
            available=False,
            message='Selected time is in the past',
            reason=UnavailableReason.PAST,
        )

    @classmethod
    def conflict(cls, suggested_times: list[datetime], message: str | None = None) -> 'AvailabilityResult':
        return cls(
            available=False,
            message=message or 'Time slot not available',
            reason=UnavailableReason.CONFLICT,
            suggested_times=suggested_times,
        )


class BookingConfirmation(BaseModel):
    appointment: Appointment

    class Config:
        frozen = True

    @property
    def id(self) -> str:
        return self.appointment.id

    @property
    def duration_minutes(self) -> int:
        return self.appointment.duration_minutes


CommitResult = BookingConfirmation | AvailabilityResult
