"""Shared fixtures."""

from datetime import datetime, timezone

import pytest

from washbay.core.config import SchedulerSettings
from washbay.ledger import Ledger
from washbay.models.appointment import CustomerDetails
from washbay.scheduling.scheduler import Scheduler

FIXED_NOW = datetime(2025, 6, 1, 6, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def ledger() -> Ledger:
    return Ledger()


@pytest.fixture
def settings() -> SchedulerSettings:
    return SchedulerSettings(default_duration_minutes=60, suggestion_max_offset_hours=3, max_suggestions=3)


@pytest.fixture
def scheduler(ledger: Ledger, settings: SchedulerSettings) -> Scheduler:
    return Scheduler(ledger, clock=lambda: FIXED_NOW, settings=settings)


@pytest.fixture
def customer() -> CustomerDetails:
    return CustomerDetails(
        name='Dana Reyes',
        phone='555-0100',
        address='12 Harbor Lane',
        email='dana@example.com',
    )
