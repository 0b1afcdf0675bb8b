import logging

from reservation_engine.application.interfaces.clock import Clock
from reservation_engine.application.interfaces.reservation_repo import ReservationRepo
from reservation_engine.application.interfaces.transaction_manager import TransactionManager
from reservation_engine.application.post_commit import PostCommitHooks
from reservation_engine.domain.entities.reservation import Reservation, ReservationStatus
from reservation_engine.domain.errors import ReservationNotFoundError


class UpdateReservationStatusUseCase:
    def __init__(
        self,
        reservation_repo: ReservationRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
        post_commit_hooks: PostCommitHooks | None = None,
    ) -> None:
        self._reservation_repo = reservation_repo
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._post_commit_hooks = post_commit_hooks or PostCommitHooks()
        self._logger = logging.getLogger(__name__)

    async def execute(
        self,
        reservation_id: str,
        target_status: str | ReservationStatus,
        actor_id: str | None = None,
    ) -> Reservation:
        target = ReservationStatus.parse(target_status)

        async with self._transaction_manager.start():
            reservation = await self._reservation_repo.get_by_id(reservation_id)
            if reservation is None:
                raise ReservationNotFoundError(reservation_id)

            previous = reservation.status
            reservation.transition_to(target, at=self._clock.now())
            await self._reservation_repo.update_status(
                reservation_id=reservation.id,
                status=reservation.status.value,
                updated_at=reservation.updated_at,
            )

        self._logger.info(
            "Reservation status updated",
            extra={
                "reservation_id": reservation.id,
                "from_status": previous.value,
                "to_status": target.value,
                "actor_id": actor_id,
            },
        )

        if reservation.is_qualifying:
            outcomes = await self._post_commit_hooks.run(reservation.id, actor_id)
            self._logger.info(
                "Post-commit side effects finished",
                extra={"reservation_id": reservation.id, "outcomes": outcomes},
            )
        return reservation
