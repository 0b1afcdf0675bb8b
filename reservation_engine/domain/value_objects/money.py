"""Value Object Money - monto en unidades menores con su moneda."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal


@dataclass(frozen=True)
class Money:
    """
    Value Object inmutable que representa un monto monetario.

    Todos los montos se guardan como enteros en unidades menores
    (centavos) para evitar errores de redondeo.

    Attributes:
        amount_minor: Monto entero en unidades menores.
        currency_code: Código ISO 4217 de la moneda (ej: USD, MXN, EUR).
    """

    amount_minor: int
    currency_code: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount_minor, int) or isinstance(self.amount_minor, bool):
            raise TypeError(f"amount_minor debe ser entero: {self.amount_minor!r}")

        if len(self.currency_code) != 3:
            raise ValueError(f"currency_code debe ser de 3 caracteres: {self.currency_code}")

        if self.amount_minor < 0:
            raise ValueError(f"amount_minor no puede ser negativo: {self.amount_minor}")

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            raise TypeError(f"No se puede sumar Money con {type(other)}")
        if self.currency_code != other.currency_code:
            raise ValueError(
                f"No se pueden sumar montos de diferentes monedas: "
                f"{self.currency_code} vs {other.currency_code}"
            )
        return Money(self.amount_minor + other.amount_minor, self.currency_code)

    def times(self, factor: int) -> "Money":
        """Multiplica por un entero (p.ej. precio por noche × noches)."""
        return Money(self.amount_minor * factor, self.currency_code)

    def percentage(self, rate: Decimal) -> "Money":
        """
        Aplica una tasa y redondea al entero más cercano (mitades hacia arriba).

        Ejemplo: 20000 × 0.20 = 4000; 12345 × 0.20 = 2469.
        """
        raw = Decimal(self.amount_minor) * Decimal(str(rate))
        return Money(int(raw.quantize(Decimal("1"), rounding=ROUND_HALF_UP)), self.currency_code)

    def is_zero(self) -> bool:
        return self.amount_minor == 0

    def __str__(self) -> str:
        return f"{Decimal(self.amount_minor) / 100:.2f} {self.currency_code}"

    @classmethod
    def zero(cls, currency_code: str = "USD") -> "Money":
        """Crea un Money con valor cero."""
        return cls(amount_minor=0, currency_code=currency_code)
