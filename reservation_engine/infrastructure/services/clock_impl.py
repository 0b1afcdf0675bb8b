"""Implementación real del servicio de reloj."""

from datetime import date, datetime, timezone

from reservation_engine.application.interfaces.clock import Clock


class ClockImpl(Clock):
    """
    Implementación real del Clock que usa el reloj del sistema.

    Para testing, usar FakeClock de application.interfaces.clock.
    """

    def now(self) -> datetime:
        """Retorna la fecha/hora actual con timezone UTC."""
        return datetime.now(timezone.utc)

    def today(self) -> date:
        """Retorna la fecha actual en UTC."""
        return datetime.now(timezone.utc).date()
