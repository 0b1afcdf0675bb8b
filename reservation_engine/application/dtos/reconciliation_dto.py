"""DTOs del barrido de reconciliación."""

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass
class SideEffectStats:
    processed: int = 0
    created: int = 0
    skipped: int = 0
    errors: int = 0


@dataclass
class ReconciliationStats:
    """Conteos por efecto secundario de una corrida de reconciliación."""

    commissions: SideEffectStats = field(default_factory=SideEffectStats)
    ledger_entries: SideEffectStats = field(default_factory=SideEffectStats)
    dry_run: bool = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
