"""SQLAlchemy-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import delete, insert, select
from sqlalchemy.engine import Row
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from foodlane.domain.exceptions import DuplicateOrderError
from foodlane.domain.model.order import Order
from foodlane.domain.model.value_objects import Money, Quantity
from foodlane.domain.repository.order_repository import OrderRepository
from foodlane.infrastructure.persistence.tables import orders


class SqlOrderRepository(OrderRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- OrderRepository interface --------------------------------------------

    def get_by_idempotency_key(self, buyer_email: str, key: str) -> Order | None:
        row = self._session.execute(
            select(orders).where(
                orders.c.buyer_email == buyer_email,
                orders.c.idempotency_key == key,
            )
        ).first()
        return self._to_domain(row) if row is not None else None

    def list_by_buyer(self, buyer_email: str) -> list[Order]:
        rows = self._session.execute(
            select(orders).where(orders.c.buyer_email == buyer_email).order_by(orders.c.seq)
        ).all()
        return [self._to_domain(row) for row in rows]

    def add(self, order: Order) -> Order:
        try:
            self._session.execute(insert(orders).values(**self._to_raw(order)))
        except IntegrityError as exc:
            if order.idempotency_key is None:
                raise
            raise DuplicateOrderError(
                f"Order with idempotency key '{order.idempotency_key}' already exists"
            ) from exc
        return order

    def delete(self, order_id: str) -> bool:
        result = self._session.execute(delete(orders).where(orders.c.id == order_id))
        return result.rowcount > 0

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "buyer_email": order.buyer_email,
            "food_id": order.food_id,
            "food_name": order.food_name,
            "quantity": order.quantity.value,
            "unit_price": str(order.unit_price.amount),
            "currency": order.unit_price.currency,
            "created_at": order.created_at,
            "idempotency_key": order.idempotency_key,
        }

    @staticmethod
    def _to_domain(row: Row) -> Order:
        created_at: datetime = row.created_at
        if created_at.tzinfo is None:
            # SQLite drops the offset; everything is stored in UTC.
            created_at = created_at.replace(tzinfo=timezone.utc)
        return Order(
            id=row.id,
            buyer_email=row.buyer_email,
            food_id=row.food_id,
            food_name=row.food_name,
            quantity=Quantity(row.quantity),
            unit_price=Money(Decimal(row.unit_price), row.currency),
            created_at=created_at,
            idempotency_key=row.idempotency_key,
        )
