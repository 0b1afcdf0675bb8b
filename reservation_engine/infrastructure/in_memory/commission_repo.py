"""Implementación in-memory del repositorio de comisiones."""

import copy
from datetime import datetime

from reservation_engine.application.interfaces.commission_repo import CommissionRepo
from reservation_engine.domain.entities.commission import Commission, CommissionStatus
from reservation_engine.domain.errors import DuplicateRecordError
from reservation_engine.infrastructure.in_memory.reservation_repo import InMemoryReservationRepo


class InMemoryCommissionRepo(CommissionRepo):
    def __init__(self, reservation_repo: InMemoryReservationRepo | None = None) -> None:
        self.commissions: dict[str, Commission] = {}
        self._reservation_repo = reservation_repo

    async def get_by_id(self, commission_id: str) -> Commission | None:
        commission = self.commissions.get(commission_id)
        return copy.deepcopy(commission) if commission else None

    async def get_by_reservation(self, reservation_id: str) -> Commission | None:
        for commission in self.commissions.values():
            if commission.reservation_id == reservation_id:
                return copy.deepcopy(commission)
        return None

    async def insert(self, commission: Commission) -> None:
        # Misma semántica que la restricción UNIQUE(reservation_id) en SQL.
        if any(c.reservation_id == commission.reservation_id for c in self.commissions.values()):
            raise DuplicateRecordError("Commission", commission.reservation_id)
        self.commissions[commission.id] = copy.deepcopy(commission)
        if self._reservation_repo is not None:
            self._reservation_repo.commission_ids.add(commission.reservation_id)

    async def update_status(
        self,
        commission_id: str,
        status: str,
        updated_at: datetime,
    ) -> None:
        if commission_id not in self.commissions:
            raise ValueError("Commission not found")
        stored = self.commissions[commission_id]
        stored.status = CommissionStatus.parse(status)
        stored.updated_at = updated_at
