"""
Post-commit side effects.

Hooks run only after the status change has committed. Each one runs inside
its own error boundary: a failure is logged and swallowed so it can never
undo or mask the transition. Missed side effects are repaired later by the
reconciliation sweep.
"""

import logging
from typing import Any, Awaitable, Callable

from reservation_engine.domain.errors import SideEffectError

logger = logging.getLogger(__name__)

Hook = Callable[[str, str | None], Awaitable[Any]]

HOOK_OK = "ok"
HOOK_FAILED = "failed"


class PostCommitHooks:
    def __init__(self) -> None:
        self._hooks: list[tuple[str, Hook]] = []

    def register(self, name: str, hook: Hook) -> None:
        self._hooks.append((name, hook))

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self._hooks]

    async def run(self, reservation_id: str, actor_id: str | None = None) -> dict[str, str]:
        """Runs every hook in registration order and reports each outcome."""
        outcomes: dict[str, str] = {}
        for name, hook in self._hooks:
            try:
                await hook(reservation_id, actor_id)
            except Exception as exc:
                error = SideEffectError(hook=name, reservation_id=reservation_id, cause=exc)
                logger.error(
                    "Post-commit side effect failed",
                    exc_info=exc,
                    extra={
                        "reservation_id": reservation_id,
                        "hook": name,
                        "error": error.message,
                    },
                )
                outcomes[name] = HOOK_FAILED
            else:
                outcomes[name] = HOOK_OK
        return outcomes
