"""Entidades del dominio de reservaciones."""

from reservation_engine.domain.entities.commission import Commission, CommissionStatus
from reservation_engine.domain.entities.ledger_entry import LedgerEntry
from reservation_engine.domain.entities.reservation import (
    ALLOWED_TRANSITIONS,
    Reservation,
    ReservationLineItem,
    ReservationStatus,
)
from reservation_engine.domain.entities.resource import Resource, UserRecord

__all__ = [
    # Reservation
    "Reservation",
    "ReservationLineItem",
    "ReservationStatus",
    "ALLOWED_TRANSITIONS",
    # Commission
    "Commission",
    "CommissionStatus",
    # Ledger
    "LedgerEntry",
    # Catalog / directory
    "Resource",
    "UserRecord",
]
