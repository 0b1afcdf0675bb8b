from datetime import datetime
from typing import Sequence

from reservation_engine.application.dtos.availability_dto import ConflictSummary
from reservation_engine.domain.entities.reservation import Reservation
from reservation_engine.domain.value_objects.stay_range import StayRange


class ReservationRepo:
    async def get_by_id(self, reservation_id: str) -> Reservation | None:
        raise NotImplementedError

    async def find_conflicts(
        self,
        resource_ids: Sequence[str],
        stay_range: StayRange,
        exclude_reservation_id: str | None = None,
    ) -> list[ConflictSummary]:
        """
        Reservaciones PENDING/CONFIRMED que se solapan con stay_range en
        alguno de los recursos, por el recurso principal o por una línea.

        Una fila por reservación, ordenadas por check_in.
        """
        raise NotImplementedError

    async def lock_resources(self, resource_ids: Sequence[str]) -> None:
        """Bloquea los recursos hasta el fin de la transacción en curso."""
        raise NotImplementedError

    async def insert(self, reservation: Reservation) -> None:
        raise NotImplementedError

    async def update_status(
        self,
        reservation_id: str,
        status: str,
        updated_at: datetime,
    ) -> None:
        raise NotImplementedError

    async def list_missing_commission(self) -> list[Reservation]:
        """CONFIRMED/COMPLETED con agente y sin comisión."""
        raise NotImplementedError

    async def list_missing_ledger_entry(self) -> list[Reservation]:
        """CONFIRMED/COMPLETED sin asiento contable."""
        raise NotImplementedError
