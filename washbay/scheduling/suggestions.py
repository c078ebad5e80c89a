"""
Alternative start times for a request that collided with a booking.

Candidates fan out around the requested start one hour at a time, trying the
later slot before the earlier one at each step:

    +1h, -1h, +2h, -2h, +3h, -3h

The first few that are still in the future and free on the bay are offered
back to the customer. The search never looks past the offset window, so it
may come back with fewer suggestions than asked for, or none at all.
"""

from datetime import datetime, timedelta
from typing import Iterator, Sequence

from washbay.models.appointment import Appointment
from washbay.scheduling.overlap import has_conflict, interval_of

HOUR = timedelta(hours=1)


def iterate_candidate_starts(start: datetime, max_offset_hours: int) -> Iterator[datetime]:
    for offset in range(1, max_offset_hours + 1):
        for step in (offset * HOUR, -offset * HOUR):
            try:
                candidate = start + step
            except OverflowError:
                # Past the edge of the calendar; nothing to offer that way.
                continue
            yield candidate


def suggest_alternatives(
    start: datetime,
    service: str,
    now: datetime,
    snapshot: Sequence[Appointment],
    *,
    max_offset_hours: int = 3,
    max_suggestions: int = 3,
    default_minutes: int | None = None,
) -> list[datetime]:
    suggestions: list[datetime] = []
    if max_suggestions <= 0:
        return suggestions

    for candidate in iterate_candidate_starts(start, max_offset_hours):
        if candidate <= now:
            continue
        try:
            candidate_interval = interval_of(candidate, service, default_minutes)
        except OverflowError:
            continue
        if has_conflict(candidate_interval, snapshot):
            continue

        suggestions.append(candidate)
        if len(suggestions) >= max_suggestions:
            break

    return suggestions
