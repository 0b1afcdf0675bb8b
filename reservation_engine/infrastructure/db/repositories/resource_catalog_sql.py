from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from reservation_engine.application.interfaces.resource_catalog import ResourceCatalog
from reservation_engine.domain.entities.resource import Resource
from reservation_engine.infrastructure.db.tables import resources


class ResourceCatalogSQL(ResourceCatalog):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_resource(self, resource_id: str) -> Resource | None:
        found = await self.get_resources_by_ids([resource_id])
        return found[0] if found else None

    async def get_resources_by_ids(self, resource_ids: Sequence[str]) -> list[Resource]:
        if not resource_ids:
            return []
        stmt = select(resources).where(resources.c.id.in_(list(resource_ids)))
        result = await self._session.execute(stmt)
        return [
            Resource(
                id=row["id"],
                name=row["name"],
                price_per_night=row["price_per_night"],
                max_guests=row["max_guests"],
                active=bool(row["active"]),
            )
            for row in result.mappings()
        ]
