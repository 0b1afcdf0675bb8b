from functools import lru_cache
from typing import Any

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from reservation_engine.api.deps import get_session_maker
from reservation_engine.application.interfaces.clock import Clock
from reservation_engine.application.interfaces.commission_repo import CommissionRepo
from reservation_engine.application.interfaces.customer_repo import CustomerRepo
from reservation_engine.application.interfaces.ledger_repo import LedgerRepo
from reservation_engine.application.interfaces.reservation_repo import ReservationRepo
from reservation_engine.application.interfaces.resource_catalog import ResourceCatalog
from reservation_engine.application.interfaces.transaction_manager import TransactionManager
from reservation_engine.application.interfaces.uuid_generator import UUIDGenerator
from reservation_engine.application.post_commit import PostCommitHooks
from reservation_engine.application.use_cases.check_availability import (
    CheckAvailabilityUseCase,
)
from reservation_engine.application.use_cases.create_reservation import (
    CreateReservationUseCase,
    RetryPolicy,
)
from reservation_engine.application.use_cases.ensure_commission import EnsureCommissionUseCase
from reservation_engine.application.use_cases.ensure_ledger_entry import (
    EnsureLedgerEntryUseCase,
)
from reservation_engine.application.use_cases.get_reservation import GetReservationUseCase
from reservation_engine.application.use_cases.reconcile_side_effects import (
    ReconcileSideEffectsUseCase,
)
from reservation_engine.application.use_cases.update_commission_status import (
    UpdateCommissionStatusUseCase,
)
from reservation_engine.application.use_cases.update_reservation_status import (
    UpdateReservationStatusUseCase,
)
from reservation_engine.config import Settings, get_settings
from reservation_engine.infrastructure.db.repositories.commission_repo_sql import (
    CommissionRepoSQL,
)
from reservation_engine.infrastructure.db.repositories.customer_repo_sql import CustomerRepoSQL
from reservation_engine.infrastructure.db.repositories.ledger_repo_sql import LedgerRepoSQL
from reservation_engine.infrastructure.db.repositories.reservation_repo_sql import (
    ReservationRepoSQL,
)
from reservation_engine.infrastructure.db.repositories.resource_catalog_sql import (
    ResourceCatalogSQL,
)
from reservation_engine.infrastructure.db.retry import retry_on_deadlock
from reservation_engine.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager
from reservation_engine.infrastructure.demo_data import demo_resources, demo_users
from reservation_engine.infrastructure.in_memory import (
    InMemoryCommissionRepo,
    InMemoryCustomerRepo,
    InMemoryLedgerRepo,
    InMemoryReservationRepo,
    InMemoryResourceCatalog,
    InMemoryTransactionManager,
)
from reservation_engine.infrastructure.services.clock_impl import ClockImpl
from reservation_engine.infrastructure.services.uuid_generator_impl import UUIDGeneratorImpl


async def get_session(settings: Settings = Depends(get_settings)) -> AsyncSession | None:
    if settings.use_in_memory:
        yield None
        return
    async with get_session_maker()() as session:
        yield session


@lru_cache(maxsize=1)
def _in_memory_bundle() -> dict[str, Any]:
    reservation_repo = InMemoryReservationRepo()
    return {
        "reservation_repo": reservation_repo,
        "commission_repo": InMemoryCommissionRepo(reservation_repo),
        "ledger_repo": InMemoryLedgerRepo(reservation_repo),
        "resource_catalog": InMemoryResourceCatalog(demo_resources()),
        "customer_repo": InMemoryCustomerRepo(demo_users()),
        "tx_manager": InMemoryTransactionManager(),
        "clock": ClockImpl(),
        "uuid_generator": UUIDGeneratorImpl(),
    }


def build_use_cases(
    settings: Settings,
    reservation_repo: ReservationRepo,
    commission_repo: CommissionRepo,
    ledger_repo: LedgerRepo,
    resource_catalog: ResourceCatalog,
    customer_repo: CustomerRepo,
    tx_manager: TransactionManager,
    clock: Clock,
    uuid_generator: UUIDGenerator,
    retry_policy: RetryPolicy | None = None,
) -> dict[str, Any]:
    """Wires every use case against one set of adapters."""
    ensure_commission = EnsureCommissionUseCase(
        reservation_repo=reservation_repo,
        commission_repo=commission_repo,
        transaction_manager=tx_manager,
        clock=clock,
        uuid_generator=uuid_generator,
        commission_rate=settings.commission_rate,
    )
    ensure_ledger_entry = EnsureLedgerEntryUseCase(
        reservation_repo=reservation_repo,
        ledger_repo=ledger_repo,
        transaction_manager=tx_manager,
        clock=clock,
        uuid_generator=uuid_generator,
        currency=settings.ledger_currency,
    )

    hooks = PostCommitHooks()
    hooks.register(
        "ensure_commission",
        lambda reservation_id, actor_id: ensure_commission.execute(reservation_id),
    )
    hooks.register("ensure_ledger_entry", ensure_ledger_entry.execute)

    return {
        "check_availability": CheckAvailabilityUseCase(
            reservation_repo=reservation_repo,
            resource_catalog=resource_catalog,
        ),
        "create_reservation": CreateReservationUseCase(
            reservation_repo=reservation_repo,
            resource_catalog=resource_catalog,
            customer_repo=customer_repo,
            transaction_manager=tx_manager,
            clock=clock,
            uuid_generator=uuid_generator,
            max_resources=settings.max_resources_per_reservation,
            max_lookahead_days=settings.max_lookahead_days,
            retry_policy=retry_policy,
        ),
        "get_reservation": GetReservationUseCase(reservation_repo=reservation_repo),
        "update_status": UpdateReservationStatusUseCase(
            reservation_repo=reservation_repo,
            transaction_manager=tx_manager,
            clock=clock,
            post_commit_hooks=hooks,
        ),
        "ensure_commission": ensure_commission,
        "ensure_ledger_entry": ensure_ledger_entry,
        "update_commission_status": UpdateCommissionStatusUseCase(
            commission_repo=commission_repo,
            transaction_manager=tx_manager,
            clock=clock,
        ),
        "reconcile_side_effects": ReconcileSideEffectsUseCase(
            reservation_repo=reservation_repo,
            ensure_commission=ensure_commission,
            ensure_ledger_entry=ensure_ledger_entry,
            transaction_manager=tx_manager,
        ),
    }


def build_sql_use_cases(settings: Settings, session: AsyncSession) -> dict[str, Any]:
    return build_use_cases(
        settings=settings,
        reservation_repo=ReservationRepoSQL(session),
        commission_repo=CommissionRepoSQL(session),
        ledger_repo=LedgerRepoSQL(session),
        resource_catalog=ResourceCatalogSQL(session),
        customer_repo=CustomerRepoSQL(session),
        tx_manager=SQLAlchemyTransactionManager(session),
        clock=ClockImpl(),
        uuid_generator=UUIDGeneratorImpl(),
        retry_policy=retry_on_deadlock,
    )


def get_use_cases(
    settings: Settings = Depends(get_settings),
    session: AsyncSession | None = Depends(get_session),
) -> dict[str, Any]:
    if settings.use_in_memory:
        return build_use_cases(settings=settings, **_in_memory_bundle())

    if not session:
        raise RuntimeError("DB session not available")
    return build_sql_use_cases(settings, session)
