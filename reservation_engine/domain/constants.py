"""Constantes del dominio de reservaciones."""

RESERVATION_STATUS_PENDING = "PENDING"
RESERVATION_STATUS_CONFIRMED = "CONFIRMED"
RESERVATION_STATUS_CANCELLED = "CANCELLED"
RESERVATION_STATUS_COMPLETED = "COMPLETED"

# Reservaciones que bloquean fechas en un recurso
BLOCKING_RESERVATION_STATUSES = (
    RESERVATION_STATUS_PENDING,
    RESERVATION_STATUS_CONFIRMED,
)

# Estados que disparan comisión y asiento contable
QUALIFYING_RESERVATION_STATUSES = (
    RESERVATION_STATUS_CONFIRMED,
    RESERVATION_STATUS_COMPLETED,
)

COMMISSION_STATUS_UNPAID = "UNPAID"
COMMISSION_STATUS_PAID = "PAID"

LEDGER_SOURCE_BOOKING = "BOOKING"
LEDGER_STATUS_CONFIRMED = "CONFIRMED"

ROLE_CUSTOMER = "CUSTOMER"
ROLE_AGENT = "AGENT"
ROLE_ADMIN = "ADMIN"
ROLE_SUPER_ADMIN = "SUPER_ADMIN"

DEFAULT_COMMISSION_RATE = "0.20"
DEFAULT_MAX_RESOURCES_PER_RESERVATION = 4
DEFAULT_MAX_LOOKAHEAD_DAYS = 365
DEFAULT_LEDGER_CURRENCY = "USD"
