"""Tests del barrido de reconciliación de efectos secundarios."""

from reservation_engine.domain.entities.reservation import ReservationStatus
from tests.factories import AGENT_ID, NOW


async def _create(use_cases, make_command, **overrides):
    return await use_cases["create_reservation"].execute(make_command(**overrides))


async def _force_status(adapters, reservation_id, status):
    """Cambia el estado sin pasar por los hooks, como si hubieran fallado."""
    await adapters["reservation_repo"].update_status(reservation_id, status, NOW)


class TestReconcileSideEffects:
    async def test_backfills_missed_records(self, use_cases, make_command, adapters):
        with_agent = await _create(use_cases, make_command, agent_id=AGENT_ID)
        without_agent = await _create(
            use_cases, make_command, check_in="2026-03-01", check_out="2026-03-02"
        )
        pending = await _create(
            use_cases, make_command, check_in="2026-04-01", check_out="2026-04-02"
        )
        await _force_status(adapters, with_agent.id, ReservationStatus.CONFIRMED.value)
        await _force_status(adapters, without_agent.id, ReservationStatus.COMPLETED.value)

        stats = await use_cases["reconcile_side_effects"].execute(actor_id="sweeper")

        assert stats.commissions.processed == 1
        assert stats.commissions.created == 1
        assert stats.ledger_entries.processed == 2
        assert stats.ledger_entries.created == 2
        assert stats.ledger_entries.errors == 0
        assert await adapters["ledger_repo"].get_by_reservation(pending.id) is None
        entry = await adapters["ledger_repo"].get_by_reservation(without_agent.id)
        assert entry.created_by == "sweeper"

    async def test_second_run_finds_nothing(self, use_cases, make_command, adapters):
        reservation = await _create(use_cases, make_command, agent_id=AGENT_ID)
        await _force_status(adapters, reservation.id, "CONFIRMED")

        await use_cases["reconcile_side_effects"].execute()
        stats = await use_cases["reconcile_side_effects"].execute()

        assert stats.commissions.processed == 0
        assert stats.ledger_entries.processed == 0

    async def test_dry_run_only_counts(self, use_cases, make_command, adapters):
        reservation = await _create(use_cases, make_command, agent_id=AGENT_ID)
        await _force_status(adapters, reservation.id, "CONFIRMED")

        stats = await use_cases["reconcile_side_effects"].execute(dry_run=True)

        assert stats.dry_run is True
        assert stats.commissions.processed == 1
        assert stats.commissions.created == 0
        assert stats.ledger_entries.processed == 1
        assert adapters["commission_repo"].commissions == {}
        assert adapters["ledger_repo"].entries == {}

    async def test_repairs_after_failed_hook(self, use_cases, make_command, adapters):
        reservation = await _create(use_cases, make_command)
        original_insert = adapters["ledger_repo"].insert

        async def broken_insert(entry):
            raise RuntimeError("ledger down")

        adapters["ledger_repo"].insert = broken_insert
        await use_cases["update_status"].execute(reservation.id, "CONFIRMED")
        assert adapters["ledger_repo"].entries == {}

        adapters["ledger_repo"].insert = original_insert
        stats = await use_cases["reconcile_side_effects"].execute()

        assert stats.ledger_entries.created == 1
        assert await adapters["ledger_repo"].get_by_reservation(reservation.id) is not None

    async def test_errors_are_counted_and_sweep_continues(
        self, use_cases, make_command, adapters
    ):
        first = await _create(use_cases, make_command)
        second = await _create(
            use_cases, make_command, check_in="2026-03-01", check_out="2026-03-02"
        )
        await _force_status(adapters, first.id, "CONFIRMED")
        await _force_status(adapters, second.id, "CONFIRMED")
        original_insert = adapters["ledger_repo"].insert

        async def flaky_insert(entry):
            if entry.reservation_id == first.id:
                raise RuntimeError("ledger down")
            await original_insert(entry)

        adapters["ledger_repo"].insert = flaky_insert

        stats = await use_cases["reconcile_side_effects"].execute()

        assert stats.ledger_entries.processed == 2
        assert stats.ledger_entries.errors == 1
        assert stats.ledger_entries.created == 1
        assert stats.to_dict()["ledger_entries"]["errors"] == 1
