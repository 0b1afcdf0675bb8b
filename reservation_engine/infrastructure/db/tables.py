from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
)

metadata = MetaData()

users = Table(
    "users",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("phone", String(50)),
    Column("role", String(20), nullable=False, default="CUSTOMER"),
    Column("active", Boolean, nullable=False, default=True),
    Column("created_at", DateTime(timezone=True)),
)

resources = Table(
    "resources",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("name", String(255), nullable=False),
    Column("price_per_night", Integer, nullable=False),
    Column("max_guests", Integer, nullable=False),
    Column("active", Boolean, nullable=False, default=True),
)

reservations = Table(
    "reservations",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("customer_id", String(36), ForeignKey("users.id"), nullable=False),
    Column("agent_id", String(36), ForeignKey("users.id")),
    Column("resource_id", String(36), ForeignKey("resources.id"), nullable=False, index=True),
    Column("customer_name", String(255), nullable=False),
    Column("customer_email", String(255), nullable=False),
    Column("resource_name", String(255), nullable=False),
    Column("check_in", Date, nullable=False),
    Column("check_out", Date, nullable=False),
    Column("guests", Integer, nullable=False),
    Column("nights", Integer, nullable=False),
    Column("total_amount", Integer, nullable=False),
    Column("status", String(16), nullable=False, index=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

reservation_items = Table(
    "reservation_items",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("reservation_id", String(36), ForeignKey("reservations.id"), nullable=False, index=True),
    Column("resource_id", String(36), ForeignKey("resources.id"), nullable=False, index=True),
    Column("resource_name", String(255), nullable=False),
    Column("price_per_night", Integer, nullable=False),
    Column("nights", Integer, nullable=False),
    Column("subtotal", Integer, nullable=False),
    Column("position", Integer, nullable=False, default=0),
)

commissions = Table(
    "commissions",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("reservation_id", String(36), ForeignKey("reservations.id"), nullable=False, unique=True),
    Column("agent_id", String(36), ForeignKey("users.id"), nullable=False),
    Column("amount", Integer, nullable=False),
    Column("rate", Numeric(5, 4), nullable=False),
    Column("status", String(16), nullable=False, default="UNPAID"),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

ledger_entries = Table(
    "ledger_entries",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("reservation_id", String(36), ForeignKey("reservations.id"), nullable=False, unique=True),
    Column("amount", Integer, nullable=False),
    Column("currency", String(3), nullable=False),
    Column("entry_date", DateTime(timezone=True), nullable=False),
    Column("source", String(32), nullable=False),
    Column("reference", String(64), nullable=False),
    Column("description", Text, nullable=False),
    Column("status", String(16), nullable=False),
    Column("created_by", String(36)),
    Column("created_at", DateTime(timezone=True), nullable=False),
)
