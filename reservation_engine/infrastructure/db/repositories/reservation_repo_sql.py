from datetime import datetime
from typing import Any, Mapping, Sequence

from sqlalchemy import and_, exists, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from reservation_engine.application.dtos.availability_dto import ConflictSummary
from reservation_engine.application.interfaces.reservation_repo import ReservationRepo
from reservation_engine.domain.constants import (
    BLOCKING_RESERVATION_STATUSES,
    QUALIFYING_RESERVATION_STATUSES,
)
from reservation_engine.domain.entities.reservation import Reservation, ReservationLineItem
from reservation_engine.domain.value_objects.stay_range import StayRange
from reservation_engine.infrastructure.db.tables import (
    commissions,
    ledger_entries,
    reservation_items,
    reservations,
    resources,
)


class ReservationRepoSQL(ReservationRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, reservation_id: str) -> Reservation | None:
        stmt = select(reservations).where(reservations.c.id == reservation_id).limit(1)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None
        loaded = await self._hydrate([row])
        return loaded[0]

    async def find_conflicts(
        self,
        resource_ids: Sequence[str],
        stay_range: StayRange,
        exclude_reservation_id: str | None = None,
    ) -> list[ConflictSummary]:
        requested = list(resource_ids)
        if not requested:
            return []

        stmt = (
            select(
                reservations.c.id,
                reservations.c.check_in,
                reservations.c.check_out,
                reservations.c.status,
                reservations.c.resource_id,
                reservation_items.c.resource_id.label("item_resource_id"),
            )
            .select_from(
                reservations.outerjoin(
                    reservation_items,
                    reservation_items.c.reservation_id == reservations.c.id,
                )
            )
            .where(
                reservations.c.status.in_(BLOCKING_RESERVATION_STATUSES),
                reservations.c.check_in < stay_range.check_out,
                reservations.c.check_out > stay_range.check_in,
                or_(
                    reservations.c.resource_id.in_(requested),
                    reservation_items.c.resource_id.in_(requested),
                ),
            )
            .order_by(reservations.c.check_in, reservations.c.id)
        )
        if exclude_reservation_id:
            stmt = stmt.where(reservations.c.id != exclude_reservation_id)

        result = await self._session.execute(stmt)
        summaries: dict[str, ConflictSummary] = {}
        touched: dict[str, set[str]] = {}
        for row in result.mappings():
            summary = summaries.get(row["id"])
            if summary is None:
                summary = ConflictSummary(
                    reservation_id=row["id"],
                    check_in=row["check_in"],
                    check_out=row["check_out"],
                    status=row["status"],
                )
                summaries[row["id"]] = summary
                touched[row["id"]] = set()
            touched[row["id"]].update({row["resource_id"], row["item_resource_id"]})

        for reservation_id, summary in summaries.items():
            summary.involved_resources = [
                resource_id for resource_id in requested if resource_id in touched[reservation_id]
            ]
        return list(summaries.values())

    async def lock_resources(self, resource_ids: Sequence[str]) -> None:
        # Orden fijo de bloqueo para evitar deadlocks entre reservas simultáneas.
        stmt = (
            select(resources.c.id)
            .where(resources.c.id.in_(sorted(resource_ids)))
            .order_by(resources.c.id)
            .with_for_update()
        )
        await self._session.execute(stmt)

    async def insert(self, reservation: Reservation) -> None:
        await self._session.execute(
            insert(reservations).values(
                id=reservation.id,
                customer_id=reservation.customer_id,
                agent_id=reservation.agent_id,
                resource_id=reservation.resource_id,
                customer_name=reservation.customer_name,
                customer_email=reservation.customer_email,
                resource_name=reservation.resource_name,
                check_in=reservation.check_in,
                check_out=reservation.check_out,
                guests=reservation.guests,
                nights=reservation.nights,
                total_amount=reservation.total_amount,
                status=reservation.status.value,
                created_at=reservation.created_at,
                updated_at=reservation.updated_at,
            )
        )
        if reservation.line_items:
            item_rows = [
                {
                    "id": item.id,
                    "reservation_id": reservation.id,
                    "resource_id": item.resource_id,
                    "resource_name": item.resource_name,
                    "price_per_night": item.price_per_night,
                    "nights": item.nights,
                    "subtotal": item.subtotal,
                    "position": position,
                }
                for position, item in enumerate(reservation.line_items)
            ]
            await self._session.execute(insert(reservation_items), item_rows)

    async def update_status(
        self,
        reservation_id: str,
        status: str,
        updated_at: datetime,
    ) -> None:
        stmt = (
            update(reservations)
            .where(reservations.c.id == reservation_id)
            .values(status=status, updated_at=updated_at)
        )
        await self._session.execute(stmt)

    async def list_missing_commission(self) -> list[Reservation]:
        has_commission = exists().where(commissions.c.reservation_id == reservations.c.id)
        stmt = (
            select(reservations)
            .where(
                and_(
                    reservations.c.status.in_(QUALIFYING_RESERVATION_STATUSES),
                    reservations.c.agent_id.is_not(None),
                    ~has_commission,
                )
            )
            .order_by(reservations.c.created_at)
        )
        result = await self._session.execute(stmt)
        return await self._hydrate(result.mappings().all())

    async def list_missing_ledger_entry(self) -> list[Reservation]:
        has_entry = exists().where(ledger_entries.c.reservation_id == reservations.c.id)
        stmt = (
            select(reservations)
            .where(
                reservations.c.status.in_(QUALIFYING_RESERVATION_STATUSES),
                ~has_entry,
            )
            .order_by(reservations.c.created_at)
        )
        result = await self._session.execute(stmt)
        return await self._hydrate(result.mappings().all())

    async def _hydrate(self, rows: Sequence[Mapping[str, Any]]) -> list[Reservation]:
        if not rows:
            return []
        ids = [row["id"] for row in rows]
        items_stmt = (
            select(reservation_items)
            .where(reservation_items.c.reservation_id.in_(ids))
            .order_by(reservation_items.c.reservation_id, reservation_items.c.position)
        )
        items_result = await self._session.execute(items_stmt)
        items_by_reservation: dict[str, list[ReservationLineItem]] = {}
        for item in items_result.mappings():
            items_by_reservation.setdefault(item["reservation_id"], []).append(
                ReservationLineItem(
                    id=item["id"],
                    reservation_id=item["reservation_id"],
                    resource_id=item["resource_id"],
                    resource_name=item["resource_name"],
                    price_per_night=item["price_per_night"],
                    nights=item["nights"],
                )
            )

        return [
            Reservation(
                id=row["id"],
                customer_id=row["customer_id"],
                customer_name=row["customer_name"],
                customer_email=row["customer_email"],
                resource_id=row["resource_id"],
                resource_name=row["resource_name"],
                check_in=row["check_in"],
                check_out=row["check_out"],
                guests=row["guests"],
                nights=row["nights"],
                total_amount=row["total_amount"],
                status=row["status"],
                agent_id=row["agent_id"],
                created_at=row["created_at"],
                updated_at=row["updated_at"],
                line_items=items_by_reservation.get(row["id"], []),
            )
            for row in rows
        ]
