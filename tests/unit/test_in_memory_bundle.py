"""
Tests del modo in-memory por defecto: el catálogo y el directorio arrancan
con los mismos datos de demostración que scripts/seed_db.py.
"""

from datetime import datetime, timedelta, timezone

import pytest

from reservation_engine.api.dependencies import _in_memory_bundle, get_use_cases
from reservation_engine.application.dtos.reservation_dto import CreateReservationCommand
from reservation_engine.infrastructure.demo_data import DEMO_RESOURCES, DEMO_USERS

DEMO_LUNA_ID = DEMO_RESOURCES[0][0]
DEMO_AGENT_ID = DEMO_USERS[0][0]


@pytest.fixture
def bundle():
    _in_memory_bundle.cache_clear()
    yield _in_memory_bundle()
    _in_memory_bundle.cache_clear()


class TestInMemoryBundle:
    async def test_catalog_has_demo_resources(self, bundle):
        catalog = bundle["resource_catalog"]

        found = await catalog.get_resources_by_ids([row[0] for row in DEMO_RESOURCES])

        assert sorted(resource.name for resource in found) == sorted(
            row[1] for row in DEMO_RESOURCES
        )

    async def test_directory_has_demo_agent(self, bundle):
        agent = await bundle["customer_repo"].get_agent(DEMO_AGENT_ID)

        assert agent is not None
        assert agent.is_active_agent

    async def test_demo_resource_can_be_booked(self, bundle, settings):
        use_cases = get_use_cases(settings=settings, session=None)
        check_in = datetime.now(timezone.utc).date() + timedelta(days=10)

        reservation = await use_cases["create_reservation"].execute(
            CreateReservationCommand(
                customer_name="Demo Cliente",
                customer_email="demo.cliente@example.com",
                resource_ids=[DEMO_LUNA_ID],
                check_in=check_in.isoformat(),
                check_out=(check_in + timedelta(days=2)).isoformat(),
                guests=2,
                agent_id=DEMO_AGENT_ID,
            )
        )

        assert reservation.resource_name == "Glamp Luna"
        assert reservation.total_amount == 15000 * 2
        assert reservation.agent_id == DEMO_AGENT_ID
