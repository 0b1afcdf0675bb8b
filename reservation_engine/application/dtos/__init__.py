"""Data Transfer Objects de la capa de aplicación."""

from reservation_engine.application.dtos.availability_dto import (
    AvailabilityResult,
    ConflictSummary,
)
from reservation_engine.application.dtos.reconciliation_dto import (
    ReconciliationStats,
    SideEffectStats,
)
from reservation_engine.application.dtos.reservation_dto import CreateReservationCommand

__all__ = [
    "AvailabilityResult",
    "ConflictSummary",
    "CreateReservationCommand",
    "ReconciliationStats",
    "SideEffectStats",
]
