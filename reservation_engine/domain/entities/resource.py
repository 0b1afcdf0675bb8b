"""Vista del catálogo de recursos y del directorio de usuarios."""

from dataclasses import dataclass

from reservation_engine.domain.constants import ROLE_AGENT, ROLE_CUSTOMER


@dataclass
class Resource:
    """Unidad rentable tal como la expone el catálogo externo."""

    id: str
    name: str
    price_per_night: int
    max_guests: int
    active: bool = True


@dataclass
class UserRecord:
    """Cliente, agente o administrador del directorio externo."""

    id: str
    name: str
    email: str
    role: str = ROLE_CUSTOMER
    active: bool = True
    phone: str | None = None

    @property
    def is_customer(self) -> bool:
        return self.role == ROLE_CUSTOMER

    @property
    def is_active_agent(self) -> bool:
        return self.role == ROLE_AGENT and self.active
