"""Value Object StayRange - rango de noches check-in/check-out."""

from dataclasses import dataclass
from datetime import date, datetime, timezone


def to_day(value: date | datetime) -> date:
    """
    Retorna el día calendario UTC.

    Un datetime con zona horaria se convierte a UTC antes de descartar la
    hora; uno sin zona se toma como UTC.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    return value


@dataclass(frozen=True)
class StayRange:
    """
    Value Object inmutable que representa una estancia.

    Intervalo semiabierto: el check-in es inclusivo y el check-out
    exclusivo, por lo que una estancia que termina el día X y otra que
    empieza el día X no se solapan.

    Attributes:
        check_in: Primer noche (inclusivo).
        check_out: Día de salida (exclusivo).
    """

    check_in: date
    check_out: date

    def __post_init__(self) -> None:
        object.__setattr__(self, "check_in", to_day(self.check_in))
        object.__setattr__(self, "check_out", to_day(self.check_out))
        if self.check_out <= self.check_in:
            raise ValueError(
                f"check_out debe ser posterior a check_in: {self.check_in} >= {self.check_out}"
            )

    @property
    def nights(self) -> int:
        """Número de noches; con fechas normalizadas siempre es >= 1."""
        return (self.check_out - self.check_in).days

    def overlaps_with(self, other: "StayRange") -> bool:
        """Verifica si este rango se superpone con otro."""
        return self.check_in < other.check_out and self.check_out > other.check_in

    def contains(self, day: date) -> bool:
        """Verifica si una noche cae dentro del rango."""
        return self.check_in <= to_day(day) < self.check_out

    def __str__(self) -> str:
        return f"{self.check_in.isoformat()} to {self.check_out.isoformat()}"
