"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the HTTP/CLI surfaces and the application layer
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from foodlane.domain.model.food import FoodItem
from foodlane.domain.model.order import Order


@dataclass(frozen=True)
class FoodDTO:
    """Output: a food listing as shown to clients."""

    id: str
    seller_email: str
    name: str
    price: str  # decimal string, e.g. "12.50"
    quantity: int
    order_count: int
    category: str | None
    image_url: str | None
    origin: str | None
    description: str | None

    @staticmethod
    def from_domain(food: FoodItem) -> FoodDTO:
        return FoodDTO(
            id=food.id,
            seller_email=food.seller_email,
            name=food.name,
            price=str(food.price.amount),
            quantity=food.quantity,
            order_count=food.order_count,
            category=food.category,
            image_url=food.image_url,
            origin=food.origin,
            description=food.description,
        )


@dataclass(frozen=True)
class OrderDTO:
    """Output: a recorded order as shown to its buyer."""

    id: str
    buyer_email: str
    food_id: str
    food_name: str
    quantity: int
    unit_price: str
    total: str
    created_at: str

    @staticmethod
    def from_domain(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,
            buyer_email=order.buyer_email,
            food_id=order.food_id,
            food_name=order.food_name,
            quantity=order.quantity.value,
            unit_price=str(order.unit_price.amount),
            total=str(order.total.amount),
            created_at=order.created_at.isoformat(),
        )


@dataclass(frozen=True)
class UpdateResult:
    """Output: how many listings an edit touched."""

    matched_count: int
    modified_count: int
