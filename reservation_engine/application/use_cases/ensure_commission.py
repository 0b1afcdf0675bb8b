import logging
from decimal import Decimal

from reservation_engine.application.interfaces.clock import Clock
from reservation_engine.application.interfaces.commission_repo import CommissionRepo
from reservation_engine.application.interfaces.reservation_repo import ReservationRepo
from reservation_engine.application.interfaces.transaction_manager import TransactionManager
from reservation_engine.application.interfaces.uuid_generator import UUIDGenerator
from reservation_engine.domain.constants import DEFAULT_COMMISSION_RATE
from reservation_engine.domain.entities.commission import Commission, CommissionStatus
from reservation_engine.domain.errors import DuplicateRecordError, ReservationNotFoundError
from reservation_engine.domain.value_objects.money import Money


class EnsureCommissionUseCase:
    """
    Create-if-absent for the agent commission of a reservation.

    Safe to call any number of times: the first call creates the record and
    every later call (or a concurrent loser of the insert race) returns it.
    """

    def __init__(
        self,
        reservation_repo: ReservationRepo,
        commission_repo: CommissionRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
        uuid_generator: UUIDGenerator,
        commission_rate: Decimal = Decimal(DEFAULT_COMMISSION_RATE),
    ) -> None:
        self._reservation_repo = reservation_repo
        self._commission_repo = commission_repo
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._uuid_generator = uuid_generator
        self._commission_rate = Decimal(str(commission_rate))
        self._logger = logging.getLogger(__name__)

    async def execute(self, reservation_id: str) -> Commission | None:
        try:
            async with self._transaction_manager.start():
                reservation = await self._reservation_repo.get_by_id(reservation_id)
                if reservation is None:
                    raise ReservationNotFoundError(reservation_id)
                if not reservation.agent_id:
                    return None

                existing = await self._commission_repo.get_by_reservation(reservation_id)
                if existing is not None:
                    return existing

                now = self._clock.now()
                amount = Money(reservation.total_amount).percentage(self._commission_rate)
                commission = Commission(
                    id=self._uuid_generator.generate_uuid(),
                    reservation_id=reservation_id,
                    agent_id=reservation.agent_id,
                    amount=amount.amount_minor,
                    rate=self._commission_rate,
                    status=CommissionStatus.UNPAID,
                    created_at=now,
                    updated_at=now,
                )
                await self._commission_repo.insert(commission)
        except DuplicateRecordError:
            return await self._load_winner(reservation_id)

        self._logger.info(
            "Commission created",
            extra={
                "reservation_id": reservation_id,
                "commission_id": commission.id,
                "agent_id": commission.agent_id,
                "amount": commission.amount,
            },
        )
        return commission

    async def _load_winner(self, reservation_id: str) -> Commission:
        async with self._transaction_manager.start():
            winner = await self._commission_repo.get_by_reservation(reservation_id)
        if winner is None:
            raise DuplicateRecordError("Commission", reservation_id)
        self._logger.info(
            "Commission already created concurrently",
            extra={"reservation_id": reservation_id, "commission_id": winner.id},
        )
        return winner
