from datetime import date, datetime
from typing import Sequence

from reservation_engine.application.dtos.availability_dto import AvailabilityResult
from reservation_engine.application.interfaces.reservation_repo import ReservationRepo
from reservation_engine.application.interfaces.resource_catalog import ResourceCatalog
from reservation_engine.application.validation import parse_stay_range, validate_resource_ids
from reservation_engine.domain.errors import ResourceNotFoundError


class CheckAvailabilityUseCase:
    """
    Answers whether resources are free for a date range.

    The answer is advisory: nothing is locked, so a later create can still
    lose to a concurrent booking.
    """

    def __init__(
        self,
        reservation_repo: ReservationRepo,
        resource_catalog: ResourceCatalog,
    ) -> None:
        self._reservation_repo = reservation_repo
        self._resource_catalog = resource_catalog

    async def execute(
        self,
        resource_ids: Sequence[str],
        check_in: date | datetime | str | None,
        check_out: date | datetime | str | None,
        exclude_reservation_id: str | None = None,
    ) -> AvailabilityResult:
        unique_ids = validate_resource_ids(resource_ids, allow_duplicates=True)

        resources = await self._resource_catalog.get_resources_by_ids(unique_ids)
        found = {resource.id for resource in resources}
        for resource_id in unique_ids:
            if resource_id not in found:
                raise ResourceNotFoundError(resource_id)

        stay_range = parse_stay_range(check_in, check_out)
        conflicts = await self._reservation_repo.find_conflicts(
            resource_ids=unique_ids,
            stay_range=stay_range,
            exclude_reservation_id=exclude_reservation_id,
        )
        return AvailabilityResult.from_conflicts(conflicts)
