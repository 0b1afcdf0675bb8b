"""Value Objects del dominio de reservaciones."""

from reservation_engine.domain.value_objects.money import Money
from reservation_engine.domain.value_objects.stay_range import StayRange, to_day

__all__ = [
    "Money",
    "StayRange",
    "to_day",
]
