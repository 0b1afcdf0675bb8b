import logging
from typing import Any, Awaitable, Callable

from reservation_engine.application.dtos.reconciliation_dto import (
    ReconciliationStats,
    SideEffectStats,
)
from reservation_engine.application.interfaces.reservation_repo import ReservationRepo
from reservation_engine.application.interfaces.transaction_manager import TransactionManager
from reservation_engine.application.use_cases.ensure_commission import EnsureCommissionUseCase
from reservation_engine.application.use_cases.ensure_ledger_entry import (
    EnsureLedgerEntryUseCase,
)
from reservation_engine.domain.entities.reservation import Reservation

logger = logging.getLogger(__name__)


class ReconcileSideEffectsUseCase:
    def __init__(
        self,
        reservation_repo: ReservationRepo,
        ensure_commission: EnsureCommissionUseCase,
        ensure_ledger_entry: EnsureLedgerEntryUseCase,
        transaction_manager: TransactionManager,
    ) -> None:
        self._reservation_repo = reservation_repo
        self._ensure_commission = ensure_commission
        self._ensure_ledger_entry = ensure_ledger_entry
        self._transaction_manager = transaction_manager

    async def execute(
        self,
        actor_id: str | None = None,
        dry_run: bool = False,
    ) -> ReconciliationStats:
        """
        Backfills commissions and ledger entries that post-commit hooks missed.

        Every reservation is handled in its own error boundary, so one bad
        record never stops the sweep. With dry_run the candidates are only
        counted.
        """
        async with self._transaction_manager.start():
            missing_commission = await self._reservation_repo.list_missing_commission()
            missing_ledger = await self._reservation_repo.list_missing_ledger_entry()

        stats = ReconciliationStats(dry_run=dry_run)
        await self._sweep(
            "ensure_commission",
            missing_commission,
            lambda reservation_id: self._ensure_commission.execute(reservation_id),
            stats.commissions,
            dry_run,
        )
        await self._sweep(
            "ensure_ledger_entry",
            missing_ledger,
            lambda reservation_id: self._ensure_ledger_entry.execute(reservation_id, actor_id),
            stats.ledger_entries,
            dry_run,
        )

        logger.info(
            "Side effect reconciliation finished",
            extra={"actor_id": actor_id, **stats.to_dict()},
        )
        return stats

    async def _sweep(
        self,
        name: str,
        reservations: list[Reservation],
        ensure: Callable[[str], Awaitable[Any]],
        stats: SideEffectStats,
        dry_run: bool,
    ) -> None:
        for reservation in reservations:
            stats.processed += 1
            if dry_run:
                continue
            try:
                created = await ensure(reservation.id)
            except Exception as exc:
                stats.errors += 1
                logger.error(
                    "Reconciliation failed for reservation",
                    exc_info=exc,
                    extra={"reservation_id": reservation.id, "hook": name},
                )
                continue
            if created is None:
                stats.skipped += 1
            else:
                stats.created += 1
