"""Directorio de usuarios en memoria."""

import uuid

from reservation_engine.application.interfaces.customer_repo import CustomerRepo
from reservation_engine.domain.constants import ROLE_CUSTOMER
from reservation_engine.domain.entities.resource import UserRecord
from reservation_engine.domain.errors import DuplicateRecordError


class InMemoryCustomerRepo(CustomerRepo):
    def __init__(self, users: list[UserRecord] | None = None) -> None:
        self.users: dict[str, UserRecord] = {}
        for user in users or []:
            self.add(user)

    def add(self, user: UserRecord) -> UserRecord:
        user.email = user.email.strip().lower()
        self.users[user.id] = user
        return user

    async def find_by_natural_id(self, email: str) -> UserRecord | None:
        key = email.strip().lower()
        for user in self.users.values():
            if user.email == key:
                return user
        return None

    async def create_customer(
        self,
        name: str,
        email: str,
        phone: str | None = None,
    ) -> UserRecord:
        key = email.strip().lower()
        if any(user.email == key for user in self.users.values()):
            raise DuplicateRecordError("Customer", key)
        return self.add(
            UserRecord(
                id=str(uuid.uuid4()),
                name=name,
                email=email,
                role=ROLE_CUSTOMER,
                phone=phone,
            )
        )

    async def get_agent(self, agent_id: str) -> UserRecord | None:
        return self.users.get(agent_id)
