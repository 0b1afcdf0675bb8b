from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from reservation_engine.api.dependencies import get_use_cases
from reservation_engine.api.schemas.reservations import ReconciliationResponse

router = APIRouter()


@router.post(
    "/workers/reconcile-side-effects",
    response_model=ReconciliationResponse,
    status_code=status.HTTP_200_OK,
)
async def reconcile_side_effects(
    use_cases: Annotated[dict, Depends(get_use_cases)],
    dry_run: bool = Query(default=False),
    actor_id: str | None = Query(default=None, alias="actor-id"),
) -> ReconciliationResponse:
    """
    Backfill commissions and ledger entries missed by post-commit hooks.

    Safe to call repeatedly; every ensure is idempotent.
    """
    stats = await use_cases["reconcile_side_effects"].execute(
        actor_id=actor_id,
        dry_run=dry_run,
    )
    return ReconciliationResponse.from_stats(stats)
