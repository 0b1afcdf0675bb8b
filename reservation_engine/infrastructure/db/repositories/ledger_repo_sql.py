from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from reservation_engine.application.interfaces.ledger_repo import LedgerRepo
from reservation_engine.domain.entities.ledger_entry import LedgerEntry
from reservation_engine.domain.errors import DuplicateRecordError
from reservation_engine.infrastructure.db.tables import ledger_entries


class LedgerRepoSQL(LedgerRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_reservation(self, reservation_id: str) -> LedgerEntry | None:
        stmt = (
            select(ledger_entries)
            .where(ledger_entries.c.reservation_id == reservation_id)
            .limit(1)
        )
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None
        return LedgerEntry(
            id=row["id"],
            reservation_id=row["reservation_id"],
            amount=row["amount"],
            currency=row["currency"],
            entry_date=row["entry_date"],
            reference=row["reference"],
            description=row["description"],
            source=row["source"],
            status=row["status"],
            created_by=row["created_by"],
            created_at=row["created_at"],
        )

    async def insert(self, entry: LedgerEntry) -> None:
        stmt = insert(ledger_entries).values(
            id=entry.id,
            reservation_id=entry.reservation_id,
            amount=entry.amount,
            currency=entry.currency,
            entry_date=entry.entry_date,
            source=entry.source,
            reference=entry.reference,
            description=entry.description,
            status=entry.status,
            created_by=entry.created_by,
            created_at=entry.created_at,
        )
        try:
            await self._session.execute(stmt)
        except IntegrityError as exc:
            raise DuplicateRecordError("LedgerEntry", entry.reservation_id) from exc
