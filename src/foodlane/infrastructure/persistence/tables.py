"""SQLAlchemy table definitions for the marketplace store.

Each table has an autoincrement ``seq`` column that fixes the natural
(insertion) order used for paging and for breaking ties. Prices are
stored as decimal strings so every backend round-trips them exactly.
"""

from __future__ import annotations

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)

metadata = MetaData()

foods = Table(
    "foods",
    metadata,
    Column("seq", Integer, primary_key=True, autoincrement=True),
    Column("id", String(32), nullable=False, unique=True),
    Column("seller_email", String(320), nullable=False, index=True),
    Column("name", String(200), nullable=False),
    Column("price", String(32), nullable=False),
    Column("currency", String(3), nullable=False, default="USD"),
    Column("quantity", Integer, nullable=False),
    Column("order_count", Integer, nullable=False, default=0),
    Column("category", String(100)),
    Column("image_url", Text),
    Column("origin", String(100)),
    Column("description", Text),
    CheckConstraint("quantity >= 0", name="ck_foods_quantity_non_negative"),
    CheckConstraint("order_count >= 0", name="ck_foods_order_count_non_negative"),
)

orders = Table(
    "orders",
    metadata,
    Column("seq", Integer, primary_key=True, autoincrement=True),
    Column("id", String(32), nullable=False, unique=True),
    Column("buyer_email", String(320), nullable=False, index=True),
    Column("food_id", String(32), nullable=False, index=True),
    Column("food_name", String(200), nullable=False),
    Column("quantity", Integer, nullable=False),
    Column("unit_price", String(32), nullable=False),
    Column("currency", String(3), nullable=False, default="USD"),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("idempotency_key", String(200)),
    CheckConstraint("quantity > 0", name="ck_orders_quantity_positive"),
    UniqueConstraint("buyer_email", "idempotency_key", name="uq_orders_idempotency"),
)

users = Table(
    "users",
    metadata,
    Column("email", String(320), primary_key=True),
    Column("name", String(200)),
    Column("photo_url", Text),
    Column("created_at", DateTime(timezone=True), nullable=False),
)
