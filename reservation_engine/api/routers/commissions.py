from fastapi import APIRouter, Depends, status

from reservation_engine.api.dependencies import get_use_cases
from reservation_engine.api.schemas.reservations import (
    CommissionResponse,
    UpdateCommissionStatusRequest,
)

router = APIRouter()


@router.patch(
    "/commissions/{commission_id}/status",
    response_model=CommissionResponse,
    status_code=status.HTTP_200_OK,
)
async def update_commission_status(
    commission_id: str,
    payload: UpdateCommissionStatusRequest,
    use_cases=Depends(get_use_cases),
) -> CommissionResponse:
    commission = await use_cases["update_commission_status"].execute(
        commission_id=commission_id,
        status=payload.status,
    )
    return CommissionResponse.from_entity(commission)
