"""Entidad Reservation - Agregado raíz del dominio."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

from reservation_engine.domain.errors import InvalidStatusTransitionError, ValidationError
from reservation_engine.domain.value_objects.stay_range import StayRange


class ReservationStatus(str, Enum):
    """Estados posibles de una reservación."""

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"

    @classmethod
    def parse(cls, value: "str | ReservationStatus") -> "ReservationStatus":
        """Convierte un string externo; valores desconocidos son error de validación."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError as exc:
            allowed = ", ".join(status.value for status in cls)
            raise ValidationError(
                f"Invalid status '{value}'. Must be one of: {allowed}", field="status"
            ) from exc


# Tabla de transiciones: CANCELLED y COMPLETED son terminales.
ALLOWED_TRANSITIONS: dict[ReservationStatus, frozenset[ReservationStatus]] = {
    ReservationStatus.PENDING: frozenset(
        {ReservationStatus.CONFIRMED, ReservationStatus.CANCELLED}
    ),
    ReservationStatus.CONFIRMED: frozenset(
        {ReservationStatus.COMPLETED, ReservationStatus.CANCELLED}
    ),
    ReservationStatus.CANCELLED: frozenset(),
    ReservationStatus.COMPLETED: frozenset(),
}


@dataclass
class ReservationLineItem:
    """Un recurso ligado a la reservación con su precio al momento de reservar."""

    resource_id: str
    resource_name: str
    price_per_night: int
    nights: int
    id: str | None = None
    reservation_id: str | None = None

    @property
    def subtotal(self) -> int:
        return self.price_per_night * self.nights


@dataclass
class Reservation:
    """
    Entidad principal del dominio - Agregado Raíz.

    Los campos customer_name, customer_email y resource_name son una foto
    tomada al crear la reservación; no se recalculan desde el catálogo ni
    desde el directorio de clientes aunque esos registros cambien.
    """

    id: str
    customer_id: str
    customer_name: str
    customer_email: str
    resource_id: str
    resource_name: str
    check_in: date
    check_out: date
    guests: int
    total_amount: int
    status: ReservationStatus = ReservationStatus.PENDING
    agent_id: str | None = None
    nights: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    line_items: list[ReservationLineItem] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.status = ReservationStatus.parse(self.status)
        if not self.nights:
            self.nights = self.stay_range.nights

    # === Propiedades calculadas ===

    @property
    def stay_range(self) -> StayRange:
        """Retorna el rango de fechas como Value Object."""
        return StayRange(check_in=self.check_in, check_out=self.check_out)

    @property
    def resource_ids(self) -> list[str]:
        """Recurso principal más los de cada línea, sin duplicados y en orden."""
        ids = [self.resource_id]
        for item in self.line_items:
            if item.resource_id not in ids:
                ids.append(item.resource_id)
        return ids

    @property
    def resource_names(self) -> list[str]:
        if not self.line_items:
            return [self.resource_name]
        return [item.resource_name for item in self.line_items]

    @property
    def blocks_dates(self) -> bool:
        """PENDING y CONFIRMED ocupan el recurso; los demás estados no."""
        return self.status in (ReservationStatus.PENDING, ReservationStatus.CONFIRMED)

    @property
    def is_qualifying(self) -> bool:
        """Verifica si la reservación genera comisión y asiento contable."""
        return self.status in (ReservationStatus.CONFIRMED, ReservationStatus.COMPLETED)

    @property
    def is_terminal(self) -> bool:
        return not ALLOWED_TRANSITIONS[self.status]

    # === Métodos de negocio ===

    def can_transition_to(self, target: ReservationStatus) -> bool:
        return target in ALLOWED_TRANSITIONS[self.status]

    def transition_to(self, target: ReservationStatus, at: datetime) -> None:
        """Aplica la transición o lanza InvalidStatusTransitionError sin modificar nada."""
        if not self.can_transition_to(target):
            raise InvalidStatusTransitionError(self.status.value, target.value)
        self.status = target
        self.updated_at = at
