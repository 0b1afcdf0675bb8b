from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, EmailStr, Field, constr

from reservation_engine.application.dtos.availability_dto import (
    AvailabilityResult,
    ConflictSummary,
)
from reservation_engine.application.dtos.reconciliation_dto import (
    ReconciliationStats,
    SideEffectStats,
)
from reservation_engine.domain.entities.commission import Commission
from reservation_engine.domain.entities.reservation import Reservation, ReservationLineItem


class CreateReservationRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    customer_name: constr(strip_whitespace=True, min_length=1, max_length=255)
    customer_email: EmailStr
    customer_phone: constr(strip_whitespace=True, max_length=50) | None = None
    # Validated by the use case so that bad IDs and dates surface as 400, not 422.
    resource_ids: list[str]
    check_in: str
    check_out: str
    guests: int = Field(default=1)
    agent_id: str | None = None


class UpdateReservationStatusRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    status: str
    actor_id: str | None = None


class UpdateCommissionStatusRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    status: str


class LineItemResponse(BaseModel):
    id: str | None
    resource_id: str
    resource_name: str
    price_per_night: int
    nights: int
    subtotal: int

    @classmethod
    def from_entity(cls, item: ReservationLineItem) -> "LineItemResponse":
        return cls(
            id=item.id,
            resource_id=item.resource_id,
            resource_name=item.resource_name,
            price_per_night=item.price_per_night,
            nights=item.nights,
            subtotal=item.subtotal,
        )


class ReservationResponse(BaseModel):
    id: str
    status: str
    customer_id: str
    customer_name: str
    customer_email: str
    agent_id: str | None
    resource_id: str
    resource_name: str
    check_in: date
    check_out: date
    guests: int
    nights: int
    total_amount: int
    created_at: datetime | None
    updated_at: datetime | None
    items: list[LineItemResponse]

    @classmethod
    def from_entity(cls, reservation: Reservation) -> "ReservationResponse":
        return cls(
            id=reservation.id,
            status=reservation.status.value,
            customer_id=reservation.customer_id,
            customer_name=reservation.customer_name,
            customer_email=reservation.customer_email,
            agent_id=reservation.agent_id,
            resource_id=reservation.resource_id,
            resource_name=reservation.resource_name,
            check_in=reservation.check_in,
            check_out=reservation.check_out,
            guests=reservation.guests,
            nights=reservation.nights,
            total_amount=reservation.total_amount,
            created_at=reservation.created_at,
            updated_at=reservation.updated_at,
            items=[LineItemResponse.from_entity(item) for item in reservation.line_items],
        )


class ConflictResponse(BaseModel):
    reservation_id: str
    check_in: date
    check_out: date
    status: str
    involved_resources: list[str]

    @classmethod
    def from_summary(cls, summary: ConflictSummary) -> "ConflictResponse":
        return cls(
            reservation_id=summary.reservation_id,
            check_in=summary.check_in,
            check_out=summary.check_out,
            status=summary.status,
            involved_resources=summary.involved_resources,
        )


class AvailabilityResponse(BaseModel):
    available: bool
    conflicts: list[ConflictResponse]

    @classmethod
    def from_result(cls, result: AvailabilityResult) -> "AvailabilityResponse":
        return cls(
            available=result.available,
            conflicts=[ConflictResponse.from_summary(c) for c in result.conflicts],
        )


class CommissionResponse(BaseModel):
    id: str
    reservation_id: str
    agent_id: str
    amount: int
    rate: Decimal
    status: str
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_entity(cls, commission: Commission) -> "CommissionResponse":
        return cls(
            id=commission.id,
            reservation_id=commission.reservation_id,
            agent_id=commission.agent_id,
            amount=commission.amount,
            rate=commission.rate,
            status=commission.status.value,
            created_at=commission.created_at,
            updated_at=commission.updated_at,
        )


class SideEffectStatsResponse(BaseModel):
    processed: int
    created: int
    skipped: int
    errors: int

    @classmethod
    def from_stats(cls, stats: SideEffectStats) -> "SideEffectStatsResponse":
        return cls(
            processed=stats.processed,
            created=stats.created,
            skipped=stats.skipped,
            errors=stats.errors,
        )


class ReconciliationResponse(BaseModel):
    dry_run: bool
    commissions: SideEffectStatsResponse
    ledger_entries: SideEffectStatsResponse

    @classmethod
    def from_stats(cls, stats: ReconciliationStats) -> "ReconciliationResponse":
        return cls(
            dry_run=stats.dry_run,
            commissions=SideEffectStatsResponse.from_stats(stats.commissions),
            ledger_entries=SideEffectStatsResponse.from_stats(stats.ledger_entries),
        )
