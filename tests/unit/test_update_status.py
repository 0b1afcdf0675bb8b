"""Tests de cambio de estado y disparo de efectos posteriores al commit."""

import logging

import pytest

from reservation_engine.domain.entities.reservation import ReservationStatus
from reservation_engine.domain.errors import (
    InvalidStatusTransitionError,
    ReservationNotFoundError,
    ValidationError,
)
from tests.factories import AGENT_ID, NOW


@pytest.fixture
async def reservation(use_cases, make_command):
    return await use_cases["create_reservation"].execute(make_command(agent_id=AGENT_ID))


class TestUpdateReservationStatus:
    async def test_pending_to_confirmed(self, use_cases, reservation, clock):
        clock.advance(hours=1)

        updated = await use_cases["update_status"].execute(reservation.id, "confirmed")

        assert updated.status == ReservationStatus.CONFIRMED
        assert updated.updated_at > NOW
        stored = await use_cases["get_reservation"].execute(reservation.id)
        assert stored.status == ReservationStatus.CONFIRMED

    async def test_confirm_triggers_commission_and_ledger(self, use_cases, reservation, adapters):
        await use_cases["update_status"].execute(reservation.id, "CONFIRMED", actor_id=AGENT_ID)

        commission = await adapters["commission_repo"].get_by_reservation(reservation.id)
        entry = await adapters["ledger_repo"].get_by_reservation(reservation.id)
        assert commission is not None
        assert commission.amount == 4000
        assert entry is not None
        assert entry.created_by == AGENT_ID

    async def test_cancel_does_not_trigger_side_effects(self, use_cases, reservation, adapters):
        await use_cases["update_status"].execute(reservation.id, "CANCELLED")

        assert adapters["commission_repo"].commissions == {}
        assert adapters["ledger_repo"].entries == {}

    async def test_cancelled_frees_dates(self, use_cases, reservation, make_command):
        await use_cases["update_status"].execute(reservation.id, "CANCELLED")

        again = await use_cases["create_reservation"].execute(make_command())
        assert again.status == ReservationStatus.PENDING

    async def test_completing_twice_keeps_single_records(self, use_cases, reservation, adapters):
        await use_cases["update_status"].execute(reservation.id, "CONFIRMED")
        await use_cases["update_status"].execute(reservation.id, "COMPLETED")

        assert len(adapters["commission_repo"].commissions) == 1
        assert len(adapters["ledger_repo"].entries) == 1

    @pytest.mark.parametrize("target", ["PENDING", "COMPLETED"])
    async def test_invalid_transition_leaves_status(self, use_cases, reservation, target):
        with pytest.raises(InvalidStatusTransitionError) as exc_info:
            await use_cases["update_status"].execute(reservation.id, target)

        assert exc_info.value.extra() == {
            "current_status": "PENDING",
            "target_status": target,
        }
        stored = await use_cases["get_reservation"].execute(reservation.id)
        assert stored.status == ReservationStatus.PENDING

    async def test_unknown_status(self, use_cases, reservation):
        with pytest.raises(ValidationError, match="Invalid status"):
            await use_cases["update_status"].execute(reservation.id, "ARCHIVED")

    async def test_unknown_reservation(self, use_cases):
        with pytest.raises(ReservationNotFoundError):
            await use_cases["update_status"].execute(
                "00000000-0000-4000-8000-00000000dead", "CONFIRMED"
            )

    async def test_failing_hook_does_not_undo_transition(
        self, use_cases, reservation, adapters, caplog
    ):
        async def broken_insert(entry):
            raise RuntimeError("ledger down")

        adapters["ledger_repo"].insert = broken_insert

        with caplog.at_level(logging.ERROR):
            updated = await use_cases["update_status"].execute(reservation.id, "CONFIRMED")

        assert updated.status == ReservationStatus.CONFIRMED
        stored = await use_cases["get_reservation"].execute(reservation.id)
        assert stored.status == ReservationStatus.CONFIRMED
        # La comisión se registró antes y sobrevive a la falla del asiento.
        assert len(adapters["commission_repo"].commissions) == 1
        assert adapters["ledger_repo"].entries == {}
        assert any(
            getattr(record, "hook", None) == "ensure_ledger_entry" for record in caplog.records
        )
