from fastapi import APIRouter, Depends, status

from reservation_engine.api.dependencies import get_use_cases
from reservation_engine.api.schemas.reservations import (
    CreateReservationRequest,
    ReservationResponse,
    UpdateReservationStatusRequest,
)
from reservation_engine.application.dtos.reservation_dto import CreateReservationCommand

router = APIRouter()


@router.post(
    "/reservations",
    response_model=ReservationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_reservation(
    payload: CreateReservationRequest,
    use_cases=Depends(get_use_cases),
) -> ReservationResponse:
    command = CreateReservationCommand(
        customer_name=payload.customer_name,
        customer_email=str(payload.customer_email),
        customer_phone=payload.customer_phone,
        resource_ids=payload.resource_ids,
        check_in=payload.check_in,
        check_out=payload.check_out,
        guests=payload.guests,
        agent_id=payload.agent_id,
    )
    reservation = await use_cases["create_reservation"].execute(command)
    return ReservationResponse.from_entity(reservation)


@router.get(
    "/reservations/{reservation_id}",
    response_model=ReservationResponse,
    status_code=status.HTTP_200_OK,
)
async def get_reservation(
    reservation_id: str,
    use_cases=Depends(get_use_cases),
) -> ReservationResponse:
    reservation = await use_cases["get_reservation"].execute(reservation_id)
    return ReservationResponse.from_entity(reservation)


@router.patch(
    "/reservations/{reservation_id}/status",
    response_model=ReservationResponse,
    status_code=status.HTTP_200_OK,
)
async def update_reservation_status(
    reservation_id: str,
    payload: UpdateReservationStatusRequest,
    use_cases=Depends(get_use_cases),
) -> ReservationResponse:
    reservation = await use_cases["update_status"].execute(
        reservation_id=reservation_id,
        target_status=payload.status,
        actor_id=payload.actor_id,
    )
    return ReservationResponse.from_entity(reservation)
