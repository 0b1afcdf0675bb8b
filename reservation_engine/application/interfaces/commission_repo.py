from datetime import datetime

from reservation_engine.domain.entities.commission import Commission


class CommissionRepo:
    async def get_by_id(self, commission_id: str) -> Commission | None:
        raise NotImplementedError

    async def get_by_reservation(self, reservation_id: str) -> Commission | None:
        raise NotImplementedError

    async def insert(self, commission: Commission) -> None:
        """Lanza DuplicateRecordError si la reservación ya tiene comisión."""
        raise NotImplementedError

    async def update_status(
        self,
        commission_id: str,
        status: str,
        updated_at: datetime,
    ) -> None:
        raise NotImplementedError
