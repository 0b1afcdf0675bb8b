"""
Backfill commissions and ledger entries for qualifying reservations.

Usage:
    python scripts/reconcile_side_effects.py [--dry-run] [--actor-id ID]

Reads DATABASE_URL from the environment or .env; exits non-zero when any
reservation could not be reconciled.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Add project root to sys.path
project_root = Path(__file__).resolve().parent.parent
sys.path.append(str(project_root))

from reservation_engine.api.dependencies import build_sql_use_cases  # noqa: E402
from reservation_engine.config import get_settings  # noqa: E402
from reservation_engine.infrastructure.db.engine import (  # noqa: E402
    build_engine,
    build_sessionmaker,
)

logger = logging.getLogger("reconcile_side_effects")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Only count the reservations that would be reconciled",
    )
    parser.add_argument(
        "--actor-id",
        default=None,
        help="User ID recorded as created_by on new ledger entries",
    )
    return parser.parse_args(argv)


async def run(dry_run: bool, actor_id: str | None) -> int:
    settings = get_settings()
    engine = build_engine(settings)
    session_maker = build_sessionmaker(engine)
    try:
        async with session_maker() as session:
            use_cases = build_sql_use_cases(settings, session)
            stats = await use_cases["reconcile_side_effects"].execute(
                actor_id=actor_id,
                dry_run=dry_run,
            )
    finally:
        await engine.dispose()

    for name, effect in (("commissions", stats.commissions), ("ledger_entries", stats.ledger_entries)):
        print(
            f"{name}: processed={effect.processed} created={effect.created} "
            f"skipped={effect.skipped} errors={effect.errors}"
        )
    if dry_run:
        print("Dry run: no records were written.")
    return 1 if stats.commissions.errors or stats.ledger_entries.errors else 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    return asyncio.run(run(dry_run=args.dry_run, actor_id=args.actor_id))


if __name__ == "__main__":
    sys.exit(main())
