from reservation_engine.domain.entities.ledger_entry import LedgerEntry


class LedgerRepo:
    async def get_by_reservation(self, reservation_id: str) -> LedgerEntry | None:
        raise NotImplementedError

    async def insert(self, entry: LedgerEntry) -> None:
        """Lanza DuplicateRecordError si la reservación ya tiene asiento."""
        raise NotImplementedError
