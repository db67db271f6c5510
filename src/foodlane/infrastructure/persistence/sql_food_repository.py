"""SQLAlchemy-backed implementation of FoodRepository."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.engine import Row
from sqlalchemy.orm import Session

from foodlane.domain.exceptions import EntityNotFoundError, InsufficientStockError
from foodlane.domain.model.food import FoodItem
from foodlane.domain.model.value_objects import Money
from foodlane.domain.repository.food_repository import FoodRepository
from foodlane.infrastructure.persistence.tables import foods


class SqlFoodRepository(FoodRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- FoodRepository interface ---------------------------------------------

    def get_by_id(self, food_id: str) -> FoodItem | None:
        row = self._session.execute(
            select(foods).where(foods.c.id == food_id)
        ).first()
        return self._to_domain(row) if row is not None else None

    def list_page(self, page: int, size: int) -> list[FoodItem]:
        rows = self._session.execute(
            select(foods).order_by(foods.c.seq).offset((page - 1) * size).limit(size)
        ).all()
        return [self._to_domain(row) for row in rows]

    def list_by_seller(self, seller_email: str) -> list[FoodItem]:
        rows = self._session.execute(
            select(foods).where(foods.c.seller_email == seller_email).order_by(foods.c.seq)
        ).all()
        return [self._to_domain(row) for row in rows]

    def list_top_ordered(self, limit: int) -> list[FoodItem]:
        rows = self._session.execute(
            select(foods)
            .order_by(foods.c.order_count.desc(), foods.c.seq.asc())
            .limit(limit)
        ).all()
        return [self._to_domain(row) for row in rows]

    def count(self) -> int:
        return self._session.execute(select(func.count()).select_from(foods)).scalar_one()

    def add(self, food: FoodItem) -> None:
        self._session.execute(insert(foods).values(**self._to_raw(food)))

    def update(self, food_id: str, changes: dict[str, Any]) -> bool:
        values = self._changes_to_raw(changes)
        result = self._session.execute(
            update(foods).where(foods.c.id == food_id).values(**values)
        )
        return result.rowcount > 0

    def delete(self, food_id: str) -> bool:
        result = self._session.execute(delete(foods).where(foods.c.id == food_id))
        return result.rowcount > 0

    def reserve(self, food_id: str, quantity: int) -> None:
        # Guarded decrement: the WHERE clause re-checks the stock in the
        # same statement that writes it.
        result = self._session.execute(
            update(foods)
            .where(foods.c.id == food_id, foods.c.quantity >= quantity)
            .values(
                quantity=foods.c.quantity - quantity,
                order_count=foods.c.order_count + 1,
            )
        )
        if result.rowcount == 1:
            return

        current = self._session.execute(
            select(foods.c.name, foods.c.quantity).where(foods.c.id == food_id)
        ).first()
        if current is None:
            raise EntityNotFoundError(f"Food '{food_id}' not found")
        raise InsufficientStockError(
            f"Not enough food (need {quantity}, have {current.quantity} available)"
        )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(food: FoodItem) -> dict[str, Any]:
        return {
            "id": food.id,
            "seller_email": food.seller_email,
            "name": food.name,
            "price": str(food.price.amount),
            "currency": food.price.currency,
            "quantity": food.quantity,
            "order_count": food.order_count,
            "category": food.category,
            "image_url": food.image_url,
            "origin": food.origin,
            "description": food.description,
        }

    @staticmethod
    def _changes_to_raw(changes: dict[str, Any]) -> dict[str, Any]:
        values = dict(changes)
        if "price" in values:
            price: Money = values.pop("price")
            values["price"] = str(price.amount)
            values["currency"] = price.currency
        return values

    @staticmethod
    def _to_domain(row: Row) -> FoodItem:
        return FoodItem(
            id=row.id,
            seller_email=row.seller_email,
            name=row.name,
            price=Money(Decimal(row.price), row.currency),
            quantity=row.quantity,
            order_count=row.order_count,
            category=row.category,
            image_url=row.image_url,
            origin=row.origin,
            description=row.description,
        )
