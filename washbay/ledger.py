from threading import RLock

from washbay.models.appointment import Appointment


class Ledger:
    """In-memory, insertion-ordered log of committed appointments.

    Lives as long as the process. ``lock`` guards the whole sequence; callers
    that need check-then-append semantics hold it across both steps.
    """

    def __init__(self, appointments: list[Appointment] | None = None) -> None:
        self._appointments: list[Appointment] = list(appointments or [])
        self.lock = RLock()

    def list(self) -> list[Appointment]:
        with self.lock:
            return list(self._appointments)

    def append(self, appointment: Appointment) -> Appointment:
        with self.lock:
            self._appointments.append(appointment)
        return appointment

    def ids(self) -> set[str]:
        with self.lock:
            return {appointment.id for appointment in self._appointments}

    def __len__(self) -> int:
        with self.lock:
            return len(self._appointments)
