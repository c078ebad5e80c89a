"""
Scheduler

Decides whether a requested start time fits on the bay, suggests nearby
alternatives when it does not, and commits bookings to the ledger.

Commit re-runs the availability checks while holding the ledger lock, so two
requests racing for the same slot cannot both be written.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable

from washbay.core.config import SchedulerSettings, load_scheduler_settings
from washbay.ledger import Ledger
from washbay.models.appointment import Appointment, CustomerDetails, ensure_utc
from washbay.models.service import duration_of, normalize_service_name, resolve_service
from washbay.scheduling.overlap import find_conflicts, interval_of
from washbay.scheduling.results import AvailabilityResult, BookingConfirmation, CommitResult
from washbay.scheduling.suggestions import suggest_alternatives

logger = logging.getLogger(__name__)

BOOKING_ID_PREFIX = 'BK-'
_BASE36_DIGITS = '0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ'
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class BookingValidationError(ValueError):
    """Request is missing a start or service, or cannot fit on the calendar."""


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_base36(value: int) -> str:
    if value == 0:
        return '0'

    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return ''.join(reversed(digits))


def generate_booking_id(now: datetime, taken_ids: set[str]) -> str:
    base_id = BOOKING_ID_PREFIX + to_base36((ensure_utc(now) - EPOCH) // timedelta(milliseconds=1))
    if base_id not in taken_ids:
        return base_id

    suffix = 2
    while f'{base_id}-{suffix}' in taken_ids:
        suffix += 1
    return f'{base_id}-{suffix}'


class Scheduler:
    """Conflict detection, suggestions and commits for one ledger."""

    def __init__(
        self,
        ledger: Ledger,
        clock: Callable[[], datetime] = utc_now,
        settings: SchedulerSettings | None = None,
    ) -> None:
        self.ledger = ledger
        self.clock = clock
        self.settings = settings or load_scheduler_settings()

    def _now(self, now: datetime | None) -> datetime:
        return ensure_utc(now if now is not None else self.clock())

    def duration_of(self, service: str) -> int:
        return duration_of(service, self.settings.default_duration_minutes)

    def list(self) -> list[Appointment]:
        return self.ledger.list()

    def _validate_request(self, start: datetime | None, service: str | None) -> tuple[datetime, str]:
        if start is None:
            raise BookingValidationError('Start time is required.')

        normalized_service = normalize_service_name(service)
        if not normalized_service:
            raise BookingValidationError('Service is required.')

        try:
            start = ensure_utc(start)
            interval_of(start, normalized_service, self.settings.default_duration_minutes)
        except OverflowError as exc:
            raise BookingValidationError('Start time is out of range.') from exc

        return start, normalized_service

    def suggest_alternatives(
        self,
        start: datetime,
        service: str,
        now: datetime | None = None,
        snapshot: list[Appointment] | None = None,
    ) -> list[datetime]:
        if snapshot is None:
            snapshot = self.ledger.list()

        return suggest_alternatives(
            ensure_utc(start),
            service,
            self._now(now),
            snapshot,
            max_offset_hours=self.settings.suggestion_max_offset_hours,
            max_suggestions=self.settings.max_suggestions,
            default_minutes=self.settings.default_duration_minutes,
        )

    def _evaluate(self, start: datetime, service: str, now: datetime, snapshot: list[Appointment]) -> AvailabilityResult:
        if start <= now:
            return AvailabilityResult.in_the_past()

        candidate = interval_of(start, service, self.settings.default_duration_minutes)
        conflicts = find_conflicts(candidate, snapshot)
        if not conflicts:
            return AvailabilityResult.free()

        logger.debug(
            'Requested %s at %s overlaps %s',
            service,
            start.isoformat(),
            ', '.join(existing.id for existing in conflicts),
        )
        suggestions = self.suggest_alternatives(start, service, now, snapshot)
        message = f"Time slot not available. There's already a booking at {conflicts[0].start.isoformat()}"
        return AvailabilityResult.conflict(suggestions, message=message)

    def check_availability(self, start: datetime, service: str, now: datetime | None = None) -> AvailabilityResult:
        start, service = self._validate_request(start, service)
        now = self._now(now)
        snapshot = self.ledger.list()

        return self._evaluate(start, service, now, snapshot)

    def commit(
        self,
        start: datetime,
        service: str,
        customer: CustomerDetails,
        now: datetime | None = None,
    ) -> CommitResult:
        start, service = self._validate_request(start, service)
        now = self._now(now)

        with self.ledger.lock:
            snapshot = self.ledger.list()
            result = self._evaluate(start, service, now, snapshot)
            if not result.available:
                logger.info(
                    'Rejected %s booking at %s: %s',
                    service,
                    start.isoformat(),
                    result.reason.value,
                )
                return result

            appointment = Appointment(
                id=generate_booking_id(now, self.ledger.ids()),
                start=start,
                service=resolve_service(service, self.settings.default_duration_minutes),
                customer=customer,
                created_at=now,
            )
            self.ledger.append(appointment)

        logger.info(
            'Booked %s: %s at %s (%d min)',
            appointment.id,
            appointment.service.name,
            appointment.start.isoformat(),
            appointment.duration_minutes,
        )
        return BookingConfirmation(appointment=appointment)
