"""Catálogo de recursos en memoria."""

from typing import Sequence

from reservation_engine.application.interfaces.resource_catalog import ResourceCatalog
from reservation_engine.domain.entities.resource import Resource


class InMemoryResourceCatalog(ResourceCatalog):
    def __init__(self, resources: list[Resource] | None = None) -> None:
        self.resources: dict[str, Resource] = {r.id: r for r in resources or []}

    def add(self, resource: Resource) -> Resource:
        self.resources[resource.id] = resource
        return resource

    async def get_resource(self, resource_id: str) -> Resource | None:
        return self.resources.get(resource_id)

    async def get_resources_by_ids(self, resource_ids: Sequence[str]) -> list[Resource]:
        return [self.resources[rid] for rid in resource_ids if rid in self.resources]
