"""
Overlap detection for the single wash bay.

Every appointment occupies the half-open interval [start, start + duration).
Two intervals conflict when they share at least one instant, so back-to-back
bookings (one ending exactly when the next begins) are allowed.
"""

from datetime import datetime
from typing import Iterable

from washbay.models.appointment import Appointment, TimeInterval
from washbay.models.service import duration_of


def interval_of(start: datetime, service: str, default_minutes: int | None = None) -> TimeInterval:
    return TimeInterval.starting_at(start, duration_of(service, default_minutes))


def interval_of_appointment(appointment: Appointment) -> TimeInterval:
    return appointment.interval


def overlaps(a: TimeInterval, b: TimeInterval) -> bool:
    return a.start < b.end and b.start < a.end


def find_conflicts(candidate: TimeInterval, snapshot: Iterable[Appointment]) -> list[Appointment]:
    """
    Return the committed appointments that overlap ``candidate``.

    Args:
        candidate: interval being proposed
        snapshot: consistent view of the ledger

    Returns:
        list[Appointment]: overlapping appointments, in ledger order
    """
    return [
        existing
        for existing in snapshot
        if overlaps(candidate, interval_of_appointment(existing))
    ]


def has_conflict(candidate: TimeInterval, snapshot: Iterable[Appointment]) -> bool:
    return any(
        overlaps(candidate, interval_of_appointment(existing))
        for existing in snapshot
    )
