"""Interfaces (Puertos) de la capa de aplicación."""

from reservation_engine.application.interfaces.clock import Clock, FakeClock
from reservation_engine.application.interfaces.commission_repo import CommissionRepo
from reservation_engine.application.interfaces.customer_repo import CustomerRepo
from reservation_engine.application.interfaces.ledger_repo import LedgerRepo
from reservation_engine.application.interfaces.reservation_repo import ReservationRepo
from reservation_engine.application.interfaces.resource_catalog import ResourceCatalog
from reservation_engine.application.interfaces.transaction_manager import TransactionManager
from reservation_engine.application.interfaces.uuid_generator import (
    FakeUUIDGenerator,
    UUIDGenerator,
)

__all__ = [
    # Repositories
    "ReservationRepo",
    "CommissionRepo",
    "LedgerRepo",
    # External collaborators
    "ResourceCatalog",
    "CustomerRepo",
    # Infrastructure
    "TransactionManager",
    # Utilities
    "Clock",
    "FakeClock",
    "UUIDGenerator",
    "FakeUUIDGenerator",
]
