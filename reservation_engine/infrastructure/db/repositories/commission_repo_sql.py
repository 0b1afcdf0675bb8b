from datetime import datetime
from typing import Any, Mapping

from sqlalchemy import insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from reservation_engine.application.interfaces.commission_repo import CommissionRepo
from reservation_engine.domain.entities.commission import Commission
from reservation_engine.domain.errors import DuplicateRecordError
from reservation_engine.infrastructure.db.tables import commissions


def _to_commission(row: Mapping[str, Any]) -> Commission:
    return Commission(
        id=row["id"],
        reservation_id=row["reservation_id"],
        agent_id=row["agent_id"],
        amount=row["amount"],
        rate=row["rate"],
        status=row["status"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


class CommissionRepoSQL(CommissionRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, commission_id: str) -> Commission | None:
        stmt = select(commissions).where(commissions.c.id == commission_id).limit(1)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        return _to_commission(row) if row else None

    async def get_by_reservation(self, reservation_id: str) -> Commission | None:
        stmt = select(commissions).where(commissions.c.reservation_id == reservation_id).limit(1)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        return _to_commission(row) if row else None

    async def insert(self, commission: Commission) -> None:
        stmt = insert(commissions).values(
            id=commission.id,
            reservation_id=commission.reservation_id,
            agent_id=commission.agent_id,
            amount=commission.amount,
            rate=commission.rate,
            status=commission.status.value,
            created_at=commission.created_at,
            updated_at=commission.updated_at,
        )
        try:
            await self._session.execute(stmt)
        except IntegrityError as exc:
            raise DuplicateRecordError("Commission", commission.reservation_id) from exc

    async def update_status(
        self,
        commission_id: str,
        status: str,
        updated_at: datetime,
    ) -> None:
        stmt = (
            update(commissions)
            .where(commissions.c.id == commission_id)
            .values(status=status, updated_at=updated_at)
        )
        await self._session.execute(stmt)
