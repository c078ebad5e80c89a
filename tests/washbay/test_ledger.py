from datetime import datetime, timezone

from washbay.ledger import Ledger
from washbay.models.appointment import Appointment, CustomerDetails
from washbay.models.service import resolve_service


def _appointment(appointment_id: str, hour: int) -> Appointment:
    return Appointment(
        id=appointment_id,
        start=datetime(2025, 6, 1, hour, 0, tzinfo=timezone.utc),
        service=resolve_service('Basic Wash'),
        customer=CustomerDetails(name='Sam', phone='555-0101', address='1 Main St'),
        created_at=datetime(2025, 5, 30, 12, 0, tzinfo=timezone.utc),
    )


def test_new_ledger_is_empty() -> None:
    ledger = Ledger()

    assert ledger.list() == []
    assert len(ledger) == 0


def test_append_returns_stored_appointment_and_keeps_insertion_order() -> None:
    ledger = Ledger()
    later = _appointment('BK-B', 14)
    earlier = _appointment('BK-A', 9)

    assert ledger.append(later) is later
    ledger.append(earlier)

    assert [appointment.id for appointment in ledger.list()] == ['BK-B', 'BK-A']
    assert ledger.ids() == {'BK-A', 'BK-B'}


def test_list_is_idempotent_without_commits() -> None:
    ledger = Ledger([_appointment('BK-A', 9)])

    assert ledger.list() == ledger.list()


def test_list_returns_a_snapshot() -> None:
    ledger = Ledger([_appointment('BK-A', 9)])

    snapshot = ledger.list()
    ledger.append(_appointment('BK-B', 11))

    assert len(snapshot) == 1
    assert len(ledger) == 2


def test_ledgers_do_not_share_state() -> None:
    first = Ledger()
    second = Ledger()

    first.append(_appointment('BK-A', 9))

    assert second.list() == []
