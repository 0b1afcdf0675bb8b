"""Implementación in-memory del libro de ingresos."""

import copy

from reservation_engine.application.interfaces.ledger_repo import LedgerRepo
from reservation_engine.domain.entities.ledger_entry import LedgerEntry
from reservation_engine.domain.errors import DuplicateRecordError
from reservation_engine.infrastructure.in_memory.reservation_repo import InMemoryReservationRepo


class InMemoryLedgerRepo(LedgerRepo):
    def __init__(self, reservation_repo: InMemoryReservationRepo | None = None) -> None:
        self.entries: dict[str, LedgerEntry] = {}
        self._reservation_repo = reservation_repo

    async def get_by_reservation(self, reservation_id: str) -> LedgerEntry | None:
        entry = self.entries.get(reservation_id)
        return copy.deepcopy(entry) if entry else None

    async def insert(self, entry: LedgerEntry) -> None:
        if entry.reservation_id in self.entries:
            raise DuplicateRecordError("LedgerEntry", entry.reservation_id)
        self.entries[entry.reservation_id] = copy.deepcopy(entry)
        if self._reservation_repo is not None:
            self._reservation_repo.ledger_ids.add(entry.reservation_id)
