"""
Catálogo y usuarios de demostración.

Los mismos IDs se siembran en memoria (modo por defecto) y en SQL con
scripts/seed_db.py, para que los ejemplos de la API sirvan en ambos modos.
"""

from reservation_engine.domain.constants import ROLE_ADMIN, ROLE_AGENT
from reservation_engine.domain.entities.resource import Resource, UserRecord

DEMO_RESOURCES = (
    ("5f0c2b1e-8a4d-4c7e-9b61-0d3a1f2e4c01", "Glamp Luna", 15000, 2),
    ("5f0c2b1e-8a4d-4c7e-9b61-0d3a1f2e4c02", "Glamp Sol", 18000, 4),
    ("5f0c2b1e-8a4d-4c7e-9b61-0d3a1f2e4c03", "Cabaña Bosque", 22000, 6),
)

DEMO_USERS = (
    ("7a9e4d20-3b1c-4f6a-8e2d-5c4b3a2f1e01", "Demo Agent", "agent@example.com", ROLE_AGENT),
    ("7a9e4d20-3b1c-4f6a-8e2d-5c4b3a2f1e02", "Demo Admin", "admin@example.com", ROLE_ADMIN),
)


def demo_resources() -> list[Resource]:
    return [
        Resource(id=resource_id, name=name, price_per_night=price, max_guests=max_guests)
        for resource_id, name, price, max_guests in DEMO_RESOURCES
    ]


def demo_users() -> list[UserRecord]:
    return [
        UserRecord(id=user_id, name=name, email=email, role=role)
        for user_id, name, email, role in DEMO_USERS
    ]
