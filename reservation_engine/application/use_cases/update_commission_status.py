import logging

from reservation_engine.application.interfaces.clock import Clock
from reservation_engine.application.interfaces.commission_repo import CommissionRepo
from reservation_engine.application.interfaces.transaction_manager import TransactionManager
from reservation_engine.domain.entities.commission import Commission, CommissionStatus
from reservation_engine.domain.errors import CommissionNotFoundError


class UpdateCommissionStatusUseCase:
    """Marks an agent commission as paid (or back to unpaid)."""

    def __init__(
        self,
        commission_repo: CommissionRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> None:
        self._commission_repo = commission_repo
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    async def execute(self, commission_id: str, status: str) -> Commission:
        target = CommissionStatus.parse(status)

        async with self._transaction_manager.start():
            commission = await self._commission_repo.get_by_id(commission_id)
            if commission is None:
                raise CommissionNotFoundError(commission_id)

            commission.status = target
            commission.updated_at = self._clock.now()
            await self._commission_repo.update_status(
                commission_id=commission.id,
                status=target.value,
                updated_at=commission.updated_at,
            )

        self._logger.info(
            "Commission status updated",
            extra={"commission_id": commission_id, "status": target.value},
        )
        return commission
