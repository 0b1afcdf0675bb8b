"""
Capa de Aplicación - Motor de Reservaciones.

Esta capa contiene los casos de uso, DTOs e interfaces (puertos).
Orquesta la lógica de negocio y define los contratos con la infraestructura.

Estructura:
- use_cases/: Casos de uso del sistema
- dtos/: Data Transfer Objects
- interfaces/: Puertos (contratos para adaptadores)
- validation.py: Validación de entrada y parseo de fechas
- post_commit.py: Efectos secundarios posteriores al commit
"""

from reservation_engine.application.dtos import (
    AvailabilityResult,
    ConflictSummary,
    CreateReservationCommand,
    ReconciliationStats,
    SideEffectStats,
)
from reservation_engine.application.interfaces import (
    Clock,
    CommissionRepo,
    CustomerRepo,
    FakeClock,
    FakeUUIDGenerator,
    LedgerRepo,
    ReservationRepo,
    ResourceCatalog,
    TransactionManager,
    UUIDGenerator,
)

__all__ = [
    # DTOs
    "AvailabilityResult",
    "ConflictSummary",
    "CreateReservationCommand",
    "ReconciliationStats",
    "SideEffectStats",
    # Interfaces - Repositories
    "ReservationRepo",
    "CommissionRepo",
    "LedgerRepo",
    # Interfaces - External collaborators
    "ResourceCatalog",
    "CustomerRepo",
    # Interfaces - Infrastructure
    "TransactionManager",
    # Interfaces - Utilities
    "Clock",
    "FakeClock",
    "UUIDGenerator",
    "FakeUUIDGenerator",
]
