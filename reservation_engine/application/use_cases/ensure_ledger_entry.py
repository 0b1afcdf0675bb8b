import logging

from reservation_engine.application.interfaces.clock import Clock
from reservation_engine.application.interfaces.ledger_repo import LedgerRepo
from reservation_engine.application.interfaces.reservation_repo import ReservationRepo
from reservation_engine.application.interfaces.transaction_manager import TransactionManager
from reservation_engine.application.interfaces.uuid_generator import UUIDGenerator
from reservation_engine.domain.constants import DEFAULT_LEDGER_CURRENCY
from reservation_engine.domain.entities.ledger_entry import LedgerEntry
from reservation_engine.domain.entities.reservation import Reservation
from reservation_engine.domain.errors import DuplicateRecordError, ReservationNotFoundError


def build_description(reservation: Reservation) -> str:
    """Human readable line built only from the reservation's snapshot fields."""
    names = ", ".join(reservation.resource_names)
    return (
        f"Booking revenue from {reservation.customer_name} for {names} "
        f"({reservation.check_in.isoformat()} to {reservation.check_out.isoformat()})"
    )


class EnsureLedgerEntryUseCase:
    def __init__(
        self,
        reservation_repo: ReservationRepo,
        ledger_repo: LedgerRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
        uuid_generator: UUIDGenerator,
        currency: str = DEFAULT_LEDGER_CURRENCY,
    ) -> None:
        self._reservation_repo = reservation_repo
        self._ledger_repo = ledger_repo
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._uuid_generator = uuid_generator
        self._currency = currency
        self._logger = logging.getLogger(__name__)

    async def execute(
        self,
        reservation_id: str,
        actor_id: str | None = None,
    ) -> LedgerEntry | None:
        try:
            async with self._transaction_manager.start():
                reservation = await self._reservation_repo.get_by_id(reservation_id)
                if reservation is None:
                    raise ReservationNotFoundError(reservation_id)
                if not reservation.is_qualifying:
                    return None

                existing = await self._ledger_repo.get_by_reservation(reservation_id)
                if existing is not None:
                    return existing

                entry = LedgerEntry(
                    id=self._uuid_generator.generate_uuid(),
                    reservation_id=reservation_id,
                    amount=reservation.total_amount,
                    currency=self._currency,
                    entry_date=reservation.updated_at or reservation.created_at or self._clock.now(),
                    reference=LedgerEntry.reference_for(reservation_id),
                    description=build_description(reservation),
                    created_by=actor_id,
                    created_at=self._clock.now(),
                )
                await self._ledger_repo.insert(entry)
        except DuplicateRecordError:
            async with self._transaction_manager.start():
                winner = await self._ledger_repo.get_by_reservation(reservation_id)
            if winner is None:
                raise
            self._logger.info(
                "Ledger entry already posted concurrently",
                extra={"reservation_id": reservation_id, "ledger_entry_id": winner.id},
            )
            return winner

        self._logger.info(
            "Ledger entry posted",
            extra={
                "reservation_id": reservation_id,
                "ledger_entry_id": entry.id,
                "amount": entry.amount,
                "currency": entry.currency,
            },
        )
        return entry
