"""Implementación in-memory del repositorio de reservaciones."""

import copy
from datetime import datetime
from typing import Sequence

from reservation_engine.application.dtos.availability_dto import ConflictSummary
from reservation_engine.application.interfaces.reservation_repo import ReservationRepo
from reservation_engine.domain.entities.reservation import Reservation, ReservationStatus
from reservation_engine.domain.value_objects.stay_range import StayRange


class InMemoryReservationRepo(ReservationRepo):
    def __init__(self) -> None:
        self.reservations: dict[str, Reservation] = {}
        # Consultado por los repos de comisiones y asientos para la reconciliación.
        self.commission_ids: set[str] = set()
        self.ledger_ids: set[str] = set()

    async def get_by_id(self, reservation_id: str) -> Reservation | None:
        reservation = self.reservations.get(reservation_id)
        return copy.deepcopy(reservation) if reservation else None

    async def find_conflicts(
        self,
        resource_ids: Sequence[str],
        stay_range: StayRange,
        exclude_reservation_id: str | None = None,
    ) -> list[ConflictSummary]:
        requested = list(resource_ids)
        conflicts = []
        for reservation in self.reservations.values():
            if reservation.id == exclude_reservation_id or not reservation.blocks_dates:
                continue
            if not reservation.stay_range.overlaps_with(stay_range):
                continue
            claimed = set(reservation.resource_ids)
            involved = [resource_id for resource_id in requested if resource_id in claimed]
            if involved:
                conflicts.append(
                    ConflictSummary(
                        reservation_id=reservation.id,
                        check_in=reservation.check_in,
                        check_out=reservation.check_out,
                        status=reservation.status.value,
                        involved_resources=involved,
                    )
                )
        conflicts.sort(key=lambda conflict: (conflict.check_in, conflict.reservation_id))
        return conflicts

    async def lock_resources(self, resource_ids: Sequence[str]) -> None:
        # La exclusión la da InMemoryTransactionManager.
        return None

    async def insert(self, reservation: Reservation) -> None:
        if reservation.id in self.reservations:
            raise ValueError("Reservation already exists")
        self.reservations[reservation.id] = copy.deepcopy(reservation)

    async def update_status(
        self,
        reservation_id: str,
        status: str,
        updated_at: datetime,
    ) -> None:
        if reservation_id not in self.reservations:
            raise ValueError("Reservation not found")
        stored = self.reservations[reservation_id]
        stored.status = ReservationStatus.parse(status)
        stored.updated_at = updated_at

    async def list_missing_commission(self) -> list[Reservation]:
        return [
            copy.deepcopy(reservation)
            for reservation in self.reservations.values()
            if reservation.is_qualifying
            and reservation.agent_id
            and reservation.id not in self.commission_ids
        ]

    async def list_missing_ledger_entry(self) -> list[Reservation]:
        return [
            copy.deepcopy(reservation)
            for reservation in self.reservations.values()
            if reservation.is_qualifying and reservation.id not in self.ledger_ids
        ]
