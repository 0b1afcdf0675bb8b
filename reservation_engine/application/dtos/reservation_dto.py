"""DTOs para reservaciones."""

from dataclasses import dataclass, field
from datetime import date, datetime


@dataclass
class CreateReservationCommand:
    """Datos de entrada para crear una reservación."""

    # Datos del cliente
    customer_name: str
    customer_email: str

    # Recursos y fechas
    resource_ids: list[str] = field(default_factory=list)
    check_in: date | datetime | str | None = None
    check_out: date | datetime | str | None = None
    guests: int = 1

    customer_phone: str | None = None
    agent_id: str | None = None
