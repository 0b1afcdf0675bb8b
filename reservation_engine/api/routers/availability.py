from fastapi import APIRouter, Depends, Query, status

from reservation_engine.api.dependencies import get_use_cases
from reservation_engine.api.schemas.reservations import AvailabilityResponse

router = APIRouter()


@router.get(
    "/availability",
    response_model=AvailabilityResponse,
    status_code=status.HTTP_200_OK,
)
async def check_availability(
    resource_ids: str = Query(..., description="Comma separated resource IDs"),
    check_in: str = Query(...),
    check_out: str = Query(...),
    exclude_reservation_id: str | None = Query(default=None),
    use_cases=Depends(get_use_cases),
) -> AvailabilityResponse:
    ids = [value.strip() for value in resource_ids.split(",") if value.strip()]
    result = await use_cases["check_availability"].execute(
        resource_ids=ids,
        check_in=check_in,
        check_out=check_out,
        exclude_reservation_id=exclude_reservation_id,
    )
    return AvailabilityResponse.from_result(result)
