import uuid
from datetime import datetime, timezone
from typing import Any, Mapping

from sqlalchemy import func, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from reservation_engine.application.interfaces.customer_repo import CustomerRepo
from reservation_engine.domain.constants import ROLE_CUSTOMER
from reservation_engine.domain.entities.resource import UserRecord
from reservation_engine.domain.errors import DuplicateRecordError
from reservation_engine.infrastructure.db.tables import users


def _to_user(row: Mapping[str, Any]) -> UserRecord:
    return UserRecord(
        id=row["id"],
        name=row["name"],
        email=row["email"],
        role=row["role"],
        active=bool(row["active"]),
        phone=row["phone"],
    )


class CustomerRepoSQL(CustomerRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_natural_id(self, email: str) -> UserRecord | None:
        stmt = select(users).where(func.lower(users.c.email) == email.strip().lower()).limit(1)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        return _to_user(row) if row else None

    async def create_customer(
        self,
        name: str,
        email: str,
        phone: str | None = None,
    ) -> UserRecord:
        record = UserRecord(
            id=str(uuid.uuid4()),
            name=name,
            email=email.strip().lower(),
            role=ROLE_CUSTOMER,
            active=True,
            phone=phone,
        )
        stmt = insert(users).values(
            id=record.id,
            name=record.name,
            email=record.email,
            phone=record.phone,
            role=record.role,
            active=record.active,
            created_at=datetime.now(timezone.utc),
        )
        # Savepoint: a unique violation must not abort the reservation transaction.
        try:
            async with self._session.begin_nested():
                await self._session.execute(stmt)
        except IntegrityError as exc:
            raise DuplicateRecordError("Customer", record.email) from exc
        return record

    async def get_agent(self, agent_id: str) -> UserRecord | None:
        stmt = select(users).where(users.c.id == agent_id).limit(1)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        return _to_user(row) if row else None
