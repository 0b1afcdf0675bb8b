"""
Tests de la capa de dominio: StayRange, Money y la máquina de estados.
"""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from reservation_engine.domain.entities.reservation import (
    ALLOWED_TRANSITIONS,
    Reservation,
    ReservationStatus,
)
from reservation_engine.domain.errors import InvalidStatusTransitionError, ValidationError
from reservation_engine.domain.value_objects.money import Money
from reservation_engine.domain.value_objects.stay_range import StayRange

NOW = datetime(2026, 1, 15, 10, 0, tzinfo=timezone.utc)


def _reservation(status: ReservationStatus) -> Reservation:
    return Reservation(
        id="00000000-0000-0000-0000-000000000001",
        customer_id="customer-1",
        customer_name="Carla",
        customer_email="carla@example.com",
        resource_id="resource-1",
        resource_name="Glamp Luna",
        check_in=date(2026, 2, 1),
        check_out=date(2026, 2, 3),
        guests=2,
        total_amount=20000,
        status=status,
        created_at=NOW,
        updated_at=NOW,
    )


class TestStayRange:
    def test_nights_counts_calendar_days(self):
        assert StayRange(date(2026, 2, 1), date(2026, 2, 3)).nights == 2

    def test_time_component_is_discarded(self):
        stay = StayRange(datetime(2026, 2, 1, 23, 59), datetime(2026, 2, 2, 0, 1))
        assert stay.check_in == date(2026, 2, 1)
        assert stay.nights == 1

    def test_aware_datetimes_use_the_utc_day(self):
        bogota = timezone(timedelta(hours=-5))
        stay = StayRange(
            datetime(2026, 2, 1, 20, 0, tzinfo=bogota),
            datetime(2026, 2, 3, 20, 0, tzinfo=bogota),
        )
        assert stay.check_in == date(2026, 2, 2)
        assert stay.check_out == date(2026, 2, 4)

    def test_checkout_must_follow_checkin(self):
        with pytest.raises(ValueError):
            StayRange(date(2026, 2, 3), date(2026, 2, 3))

    def test_back_to_back_stays_do_not_overlap(self):
        first = StayRange(date(2026, 1, 8), date(2026, 1, 10))
        second = StayRange(date(2026, 1, 10), date(2026, 1, 12))
        assert not first.overlaps_with(second)
        assert not second.overlaps_with(first)

    def test_shifting_one_day_creates_overlap(self):
        first = StayRange(date(2026, 1, 8), date(2026, 1, 11))
        second = StayRange(date(2026, 1, 10), date(2026, 1, 12))
        assert first.overlaps_with(second)

        earlier = StayRange(date(2026, 1, 9), date(2026, 1, 12))
        assert StayRange(date(2026, 1, 8), date(2026, 1, 10)).overlaps_with(earlier)

    def test_str_uses_iso_dates(self):
        assert str(StayRange(date(2026, 2, 1), date(2026, 2, 3))) == "2026-02-01 to 2026-02-03"


class TestMoney:
    def test_percentage_rounds_half_up(self):
        assert Money(20000).percentage(Decimal("0.20")).amount_minor == 4000
        assert Money(12345).percentage(Decimal("0.20")).amount_minor == 2469
        assert Money(2).percentage(Decimal("0.25")).amount_minor == 1
        assert Money(6).percentage(Decimal("0.25")).amount_minor == 2

    def test_rejects_float_amounts(self):
        with pytest.raises(TypeError):
            Money(10.5)

    def test_rejects_mixed_currencies(self):
        with pytest.raises(ValueError):
            Money(100, "USD") + Money(100, "MXN")

    def test_times_and_add(self):
        total = Money(10000).times(2) + Money(15000).times(2)
        assert total.amount_minor == 50000


class TestReservationStateMachine:
    """Cada par (origen, destino) fuera de la tabla debe fallar sin modificar nada."""

    @pytest.mark.parametrize(
        "current,target",
        [
            (ReservationStatus.PENDING, ReservationStatus.CONFIRMED),
            (ReservationStatus.PENDING, ReservationStatus.CANCELLED),
            (ReservationStatus.CONFIRMED, ReservationStatus.COMPLETED),
            (ReservationStatus.CONFIRMED, ReservationStatus.CANCELLED),
        ],
    )
    def test_allowed_transitions(self, current, target):
        reservation = _reservation(current)
        later = datetime(2026, 1, 16, tzinfo=timezone.utc)

        reservation.transition_to(target, at=later)

        assert reservation.status == target
        assert reservation.updated_at == later

    @pytest.mark.parametrize(
        "current,target",
        [
            (current, target)
            for current in ReservationStatus
            for target in ReservationStatus
            if target not in ALLOWED_TRANSITIONS[current]
        ],
    )
    def test_disallowed_transitions_leave_status_unchanged(self, current, target):
        reservation = _reservation(current)

        with pytest.raises(InvalidStatusTransitionError) as exc_info:
            reservation.transition_to(target, at=datetime(2026, 1, 16, tzinfo=timezone.utc))

        assert reservation.status == current
        assert reservation.updated_at == NOW
        assert exc_info.value.extra() == {
            "current_status": current.value,
            "target_status": target.value,
        }

    def test_terminal_statuses(self):
        assert _reservation(ReservationStatus.CANCELLED).is_terminal
        assert _reservation(ReservationStatus.COMPLETED).is_terminal
        assert not _reservation(ReservationStatus.PENDING).is_terminal

    def test_unknown_status_is_validation_error(self):
        with pytest.raises(ValidationError):
            ReservationStatus.parse("ARCHIVED")

    def test_status_parse_is_case_insensitive(self):
        assert ReservationStatus.parse("confirmed") == ReservationStatus.CONFIRMED

    def test_only_pending_and_confirmed_block_dates(self):
        blocking = {s for s in ReservationStatus if _reservation(s).blocks_dates}
        assert blocking == {ReservationStatus.PENDING, ReservationStatus.CONFIRMED}
