"""Implementaciones in-memory para desarrollo local y testing."""

from reservation_engine.infrastructure.in_memory.commission_repo import InMemoryCommissionRepo
from reservation_engine.infrastructure.in_memory.customer_repo import InMemoryCustomerRepo
from reservation_engine.infrastructure.in_memory.ledger_repo import InMemoryLedgerRepo
from reservation_engine.infrastructure.in_memory.reservation_repo import InMemoryReservationRepo
from reservation_engine.infrastructure.in_memory.resource_catalog import InMemoryResourceCatalog
from reservation_engine.infrastructure.in_memory.transaction_manager import (
    InMemoryTransactionManager,
)

__all__ = [
    # Repositories
    "InMemoryReservationRepo",
    "InMemoryCommissionRepo",
    "InMemoryLedgerRepo",
    # External collaborators
    "InMemoryResourceCatalog",
    "InMemoryCustomerRepo",
    # Infrastructure
    "InMemoryTransactionManager",
]
