"""Servicios de infraestructura."""

from reservation_engine.infrastructure.services.clock_impl import ClockImpl
from reservation_engine.infrastructure.services.uuid_generator_impl import UUIDGeneratorImpl

__all__ = [
    "ClockImpl",
    "UUIDGeneratorImpl",
]
