import asyncio
import sys
from datetime import datetime, timezone
from pathlib import Path

# Add project root to sys.path
project_root = Path(__file__).resolve().parent.parent
sys.path.append(str(project_root))

from sqlalchemy import insert  # noqa: E402

from reservation_engine.config import get_settings  # noqa: E402
from reservation_engine.infrastructure.db.engine import build_engine  # noqa: E402
from reservation_engine.infrastructure.db.tables import metadata, resources, users  # noqa: E402
from reservation_engine.infrastructure.demo_data import (  # noqa: E402
    demo_resources,
    demo_users,
)


async def seed():
    engine = build_engine(get_settings())
    async with engine.begin() as conn:
        # Recreate tables
        await conn.run_sync(metadata.drop_all)
        await conn.run_sync(metadata.create_all)
        print("Recreated all tables.")

        for resource in demo_resources():
            await conn.execute(
                insert(resources).values(
                    id=resource.id,
                    name=resource.name,
                    price_per_night=resource.price_per_night,
                    max_guests=resource.max_guests,
                    active=resource.active,
                )
            )
            print(f"Resource {resource.name}: {resource.id}")

        now = datetime.now(timezone.utc)
        for user in demo_users():
            await conn.execute(
                insert(users).values(
                    id=user.id,
                    name=user.name,
                    email=user.email,
                    role=user.role,
                    active=user.active,
                    created_at=now,
                )
            )
            print(f"{user.role} {user.email}: {user.id}")

        print("Seeded basic data.")
    await engine.dispose()

if __name__ == "__main__":
    asyncio.run(seed())
