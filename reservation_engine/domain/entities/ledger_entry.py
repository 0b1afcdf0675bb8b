"""Entidad LedgerEntry - asiento de ingreso generado por una reservación."""

from dataclasses import dataclass
from datetime import datetime

from reservation_engine.domain.constants import LEDGER_SOURCE_BOOKING, LEDGER_STATUS_CONFIRMED


@dataclass
class LedgerEntry:
    """Ingreso contable; a lo sumo uno por reservación."""

    id: str
    reservation_id: str
    amount: int
    currency: str
    entry_date: datetime
    reference: str
    description: str
    source: str = LEDGER_SOURCE_BOOKING
    status: str = LEDGER_STATUS_CONFIRMED
    created_by: str | None = None
    created_at: datetime | None = None

    @staticmethod
    def reference_for(reservation_id: str) -> str:
        """Referencia corta y legible: BOOKING-<8 primeros caracteres>."""
        return f"{LEDGER_SOURCE_BOOKING}-{reservation_id[:8]}"
