"""Order aggregate: a buyer's purchase claim against one FoodItem.

An order is written once, together with the stock decrement that backs
it, and never changes afterwards.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from foodlane.domain.exceptions import SelfPurchaseError
from foodlane.domain.model.food import FoodItem
from foodlane.domain.model.value_objects import Money, Quantity, normalize_email


@dataclass
class Order:
    """Aggregate root for purchases.

    ``unit_price`` and ``food_name`` are snapshots taken at purchase
    time, so later catalog edits do not rewrite order history.
    """

    id: str
    buyer_email: str
    food_id: str
    food_name: str
    quantity: Quantity
    unit_price: Money  # locked at purchase time
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    idempotency_key: str | None = None

    @staticmethod
    def place(
        food: FoodItem,
        buyer_email: str,
        quantity: Quantity,
        idempotency_key: str | None = None,
    ) -> Order:
        """Create a new order for ``food``, enforcing the buyer rules."""
        buyer = normalize_email(buyer_email)
        if food.is_sold_by(buyer):
            raise SelfPurchaseError("You cannot buy your own food")
        return Order(
            id=uuid.uuid4().hex,
            buyer_email=buyer,
            food_id=food.id,
            food_name=food.name,
            quantity=quantity,
            unit_price=food.price,
            idempotency_key=idempotency_key,
        )

    @property
    def total(self) -> Money:
        return self.unit_price * self.quantity.value
