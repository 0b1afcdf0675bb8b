"""Interface ResourceCatalog - Puerto de lectura al catálogo de recursos."""

from typing import Sequence

from reservation_engine.domain.entities.resource import Resource


class ResourceCatalog:
    """
    Catálogo externo de recursos rentables.

    El motor solo lee del catálogo; el alta y la edición de recursos
    pertenecen a otro sistema.
    """

    async def get_resource(self, resource_id: str) -> Resource | None:
        raise NotImplementedError

    async def get_resources_by_ids(self, resource_ids: Sequence[str]) -> list[Resource]:
        """
        Obtiene los recursos existentes de la lista solicitada.

        Los IDs desconocidos simplemente no aparecen en el resultado.
        """
        raise NotImplementedError
