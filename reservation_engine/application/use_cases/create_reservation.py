import logging
from datetime import timedelta
from typing import Awaitable, Callable, TypeVar

from reservation_engine.application.dtos.reservation_dto import CreateReservationCommand
from reservation_engine.application.interfaces.clock import Clock
from reservation_engine.application.interfaces.customer_repo import CustomerRepo
from reservation_engine.application.interfaces.reservation_repo import ReservationRepo
from reservation_engine.application.interfaces.resource_catalog import ResourceCatalog
from reservation_engine.application.interfaces.transaction_manager import TransactionManager
from reservation_engine.application.interfaces.uuid_generator import UUIDGenerator
from reservation_engine.application.use_cases.check_availability import (
    CheckAvailabilityUseCase,
)
from reservation_engine.application.validation import (
    is_valid_uuid,
    parse_stay_range,
    validate_resource_ids,
)
from reservation_engine.domain.constants import (
    DEFAULT_MAX_LOOKAHEAD_DAYS,
    DEFAULT_MAX_RESOURCES_PER_RESERVATION,
)
from reservation_engine.domain.entities.reservation import (
    Reservation,
    ReservationLineItem,
    ReservationStatus,
)
from reservation_engine.domain.entities.resource import Resource, UserRecord
from reservation_engine.domain.errors import (
    AgentNotFoundError,
    AvailabilityConflictError,
    DuplicateRecordError,
    ResourceNotFoundError,
    ValidationError,
)
from reservation_engine.domain.value_objects.money import Money
from reservation_engine.domain.value_objects.stay_range import StayRange

T = TypeVar("T")
RetryPolicy = Callable[[Callable[[], Awaitable[T]]], Awaitable[T]]


async def _run_once(func: Callable[[], Awaitable[T]]) -> T:
    return await func()


class CreateReservationUseCase:
    def __init__(
        self,
        reservation_repo: ReservationRepo,
        resource_catalog: ResourceCatalog,
        customer_repo: CustomerRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
        uuid_generator: UUIDGenerator,
        max_resources: int = DEFAULT_MAX_RESOURCES_PER_RESERVATION,
        max_lookahead_days: int = DEFAULT_MAX_LOOKAHEAD_DAYS,
        retry_policy: RetryPolicy | None = None,
    ) -> None:
        self._reservation_repo = reservation_repo
        self._resource_catalog = resource_catalog
        self._customer_repo = customer_repo
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._uuid_generator = uuid_generator
        self._max_resources = max_resources
        self._max_lookahead_days = max_lookahead_days
        self._retry_policy = retry_policy or _run_once
        self._availability = CheckAvailabilityUseCase(
            reservation_repo=reservation_repo,
            resource_catalog=resource_catalog,
        )
        self._logger = logging.getLogger(__name__)

    async def execute(self, command: CreateReservationCommand) -> Reservation:
        customer_name = (command.customer_name or "").strip()
        customer_email = (command.customer_email or "").strip().lower()
        if not customer_name:
            raise ValidationError("Customer name is required", field="customer_name")
        if not customer_email:
            raise ValidationError("Customer email is required", field="customer_email")
        if command.check_in is None or command.check_out is None:
            raise ValidationError("Check-in and check-out dates are required", field="check_in")
        if command.guests is None or command.guests < 1:
            raise ValidationError("At least one guest is required", field="guests")

        resource_ids = validate_resource_ids(command.resource_ids, max_count=self._max_resources)
        stay_range = parse_stay_range(command.check_in, command.check_out)
        self._validate_booking_window(stay_range)

        resources = await self._load_resources(resource_ids)
        capacity = sum(resource.max_guests for resource in resources)
        if command.guests > capacity:
            raise ValidationError(
                f"Number of guests ({command.guests}) exceeds capacity ({capacity})",
                field="guests",
            )

        if command.agent_id:
            await self._validate_agent(command.agent_id)

        # Fail fast on obvious conflicts; the authoritative check runs under the lock.
        availability = await self._availability.execute(
            resource_ids=resource_ids,
            check_in=stay_range.check_in,
            check_out=stay_range.check_out,
        )
        if not availability.available:
            raise AvailabilityConflictError(availability.conflicts)

        async def persist() -> Reservation:
            async with self._transaction_manager.start():
                await self._reservation_repo.lock_resources(sorted(resource_ids))
                conflicts = await self._reservation_repo.find_conflicts(
                    resource_ids=resource_ids,
                    stay_range=stay_range,
                )
                if conflicts:
                    raise AvailabilityConflictError(conflicts)

                customer = await self._resolve_customer(
                    customer_name, customer_email, command.customer_phone
                )
                reservation = self._build_reservation(
                    customer=customer,
                    customer_name=customer_name,
                    customer_email=customer_email,
                    resources=resources,
                    stay_range=stay_range,
                    guests=command.guests,
                    agent_id=command.agent_id,
                )
                await self._reservation_repo.insert(reservation)
                return reservation

        try:
            reservation = await self._retry_policy(persist)
        except AvailabilityConflictError as exc:
            self._logger.info(
                "Reservation rejected, dates already taken",
                extra={
                    "resource_ids": resource_ids,
                    "check_in": stay_range.check_in.isoformat(),
                    "check_out": stay_range.check_out.isoformat(),
                    "conflicts": [conflict.reservation_id for conflict in exc.conflicts],
                },
            )
            raise

        self._logger.info(
            "Reservation created",
            extra={
                "reservation_id": reservation.id,
                "resource_ids": reservation.resource_ids,
                "total_amount": reservation.total_amount,
                "agent_id": reservation.agent_id,
            },
        )
        return reservation

    def _validate_booking_window(self, stay_range: StayRange) -> None:
        today = self._clock.today()
        if stay_range.check_in < today:
            raise ValidationError("Check-in date cannot be in the past", field="check_in")
        latest = today + timedelta(days=self._max_lookahead_days)
        if stay_range.check_in > latest:
            raise ValidationError(
                f"Check-in date cannot be more than {self._max_lookahead_days} days in advance",
                field="check_in",
            )

    async def _load_resources(self, resource_ids: list[str]) -> list[Resource]:
        found = {
            resource.id: resource
            for resource in await self._resource_catalog.get_resources_by_ids(resource_ids)
        }
        resources = []
        for resource_id in resource_ids:
            resource = found.get(resource_id)
            if resource is None:
                raise ResourceNotFoundError(resource_id)
            if not resource.active:
                raise ValidationError(
                    f"Resource {resource.name} is not available for booking",
                    field="resource_ids",
                )
            resources.append(resource)
        return resources

    async def _validate_agent(self, agent_id: str) -> None:
        if not is_valid_uuid(agent_id):
            raise ValidationError(f"Invalid agent ID format: {agent_id}", field="agent_id")
        agent = await self._customer_repo.get_agent(agent_id)
        if agent is None:
            raise AgentNotFoundError(agent_id)
        if not agent.is_active_agent:
            raise ValidationError(f"User {agent_id} is not an active agent", field="agent_id")

    async def _resolve_customer(
        self,
        name: str,
        email: str,
        phone: str | None,
    ) -> UserRecord:
        existing = await self._customer_repo.find_by_natural_id(email)
        if existing is None:
            try:
                return await self._customer_repo.create_customer(
                    name=name, email=email, phone=phone
                )
            except DuplicateRecordError:
                existing = await self._customer_repo.find_by_natural_id(email)
                if existing is None:
                    raise
                self._logger.info(
                    "Customer already created concurrently",
                    extra={"customer_id": existing.id},
                )
        if not existing.is_customer:
            raise ValidationError(
                f"Email {email} belongs to a {existing.role} account, not a customer",
                field="customer_email",
            )
        return existing

    def _build_reservation(
        self,
        customer: UserRecord,
        customer_name: str,
        customer_email: str,
        resources: list[Resource],
        stay_range: StayRange,
        guests: int,
        agent_id: str | None,
    ) -> Reservation:
        reservation_id = self._uuid_generator.generate_uuid()
        nights = stay_range.nights
        line_items = [
            ReservationLineItem(
                id=self._uuid_generator.generate_uuid(),
                reservation_id=reservation_id,
                resource_id=resource.id,
                resource_name=resource.name,
                price_per_night=resource.price_per_night,
                nights=nights,
            )
            for resource in resources
        ]
        total = Money.zero()
        for item in line_items:
            total = total + Money(item.price_per_night).times(item.nights)

        now = self._clock.now()
        primary = resources[0]
        return Reservation(
            id=reservation_id,
            customer_id=customer.id,
            customer_name=customer_name,
            customer_email=customer_email,
            resource_id=primary.id,
            resource_name=primary.name,
            check_in=stay_range.check_in,
            check_out=stay_range.check_out,
            guests=guests,
            nights=nights,
            total_amount=total.amount_minor,
            status=ReservationStatus.PENDING,
            agent_id=agent_id,
            created_at=now,
            updated_at=now,
            line_items=line_items,
        )
