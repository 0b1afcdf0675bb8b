"""Entidad Commission - comisión de referido para el agente."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum

from reservation_engine.domain.errors import ValidationError


class CommissionStatus(str, Enum):
    """Estados de pago de una comisión."""

    UNPAID = "UNPAID"
    PAID = "PAID"

    @classmethod
    def parse(cls, value: "str | CommissionStatus") -> "CommissionStatus":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError as exc:
            raise ValidationError(
                f"Invalid status '{value}'. Must be one of: UNPAID, PAID", field="status"
            ) from exc


@dataclass
class Commission:
    """
    Comisión asociada a exactamente una reservación.

    La restricción de unicidad sobre reservation_id vive en el
    almacenamiento; esta entidad solo transporta los datos.
    """

    id: str
    reservation_id: str
    agent_id: str
    amount: int
    rate: Decimal
    status: CommissionStatus = CommissionStatus.UNPAID
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        self.status = CommissionStatus.parse(self.status)
        self.rate = Decimal(str(self.rate))

    @property
    def is_paid(self) -> bool:
        return self.status == CommissionStatus.PAID
