"""
Capa de Dominio - Motor de Reservaciones.

Esta capa contiene la lógica de negocio pura, sin dependencias de frameworks.
Incluye entidades, value objects y excepciones de dominio.

Estructura:
- entities/: Entidades del dominio (Reservation, Commission, LedgerEntry, etc.)
- value_objects/: Objetos de valor inmutables (StayRange, Money)
- errors.py: Excepciones específicas del dominio
- constants.py: Constantes del dominio
"""

from reservation_engine.domain.entities import (
    ALLOWED_TRANSITIONS,
    Commission,
    CommissionStatus,
    LedgerEntry,
    Reservation,
    ReservationLineItem,
    ReservationStatus,
    Resource,
    UserRecord,
)
from reservation_engine.domain.errors import (
    AgentNotFoundError,
    AvailabilityConflictError,
    CommissionNotFoundError,
    ConflictError,
    DomainError,
    DuplicateRecordError,
    InvalidDateRangeError,
    InvalidStatusTransitionError,
    NotFoundError,
    ReservationNotFoundError,
    ResourceNotFoundError,
    SideEffectError,
    ValidationError,
)
from reservation_engine.domain.value_objects import Money, StayRange

__all__ = [
    # Entities
    "Reservation",
    "ReservationLineItem",
    "ReservationStatus",
    "ALLOWED_TRANSITIONS",
    "Commission",
    "CommissionStatus",
    "LedgerEntry",
    "Resource",
    "UserRecord",
    # Value Objects
    "Money",
    "StayRange",
    # Errors
    "DomainError",
    "ValidationError",
    "InvalidDateRangeError",
    "InvalidStatusTransitionError",
    "NotFoundError",
    "ReservationNotFoundError",
    "ResourceNotFoundError",
    "AgentNotFoundError",
    "CommissionNotFoundError",
    "ConflictError",
    "AvailabilityConflictError",
    "DuplicateRecordError",
    "SideEffectError",
]
