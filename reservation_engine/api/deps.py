from functools import lru_cache

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from reservation_engine.config import get_settings
from reservation_engine.infrastructure.db.engine import build_engine, build_sessionmaker

# Ensure we have a valid URL or fallback to memory for dev/test if not set
FALLBACK_DB_URL = "sqlite+aiosqlite:///:memory:"


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    settings = get_settings()
    if not settings.database_url:
        settings = settings.model_copy(update={"database_url": FALLBACK_DB_URL})
    return build_engine(settings)


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return build_sessionmaker(get_engine())

