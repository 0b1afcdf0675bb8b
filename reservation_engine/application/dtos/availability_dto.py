"""DTOs para consultas de disponibilidad."""

from dataclasses import dataclass, field
from datetime import date
from typing import Any


@dataclass
class ConflictSummary:
    """Resumen de una reservación que bloquea las fechas solicitadas."""

    reservation_id: str
    check_in: date
    check_out: date
    status: str
    involved_resources: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "reservation_id": self.reservation_id,
            "check_in": self.check_in.isoformat(),
            "check_out": self.check_out.isoformat(),
            "status": self.status,
            "involved_resources": list(self.involved_resources),
        }


@dataclass
class AvailabilityResult:
    """Resultado consultivo: no garantiza que la reserva posterior tenga éxito."""

    available: bool
    conflicts: list[ConflictSummary] = field(default_factory=list)

    @classmethod
    def from_conflicts(cls, conflicts: list[ConflictSummary]) -> "AvailabilityResult":
        return cls(available=not conflicts, conflicts=conflicts)
