"""Interface CustomerRepo - Puerto para el directorio de clientes y agentes."""

from reservation_engine.domain.entities.resource import UserRecord


class CustomerRepo:
    async def find_by_natural_id(self, email: str) -> UserRecord | None:
        """Busca un usuario por email (comparación en minúsculas)."""
        raise NotImplementedError

    async def create_customer(
        self,
        name: str,
        email: str,
        phone: str | None = None,
    ) -> UserRecord:
        """Lanza DuplicateRecordError si el email ya está registrado."""
        raise NotImplementedError

    async def get_agent(self, agent_id: str) -> UserRecord | None:
        """Retorna el usuario con ese ID, sin filtrar por rol."""
        raise NotImplementedError
