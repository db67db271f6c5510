"""FoodItem aggregate: a seller's listing with stock and order tally.

Food items live independently of orders. Sellers create, edit and
remove them; the only other mutation is the stock reservation performed
when a buyer places an order.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any

from foodlane.domain.exceptions import ValidationError
from foodlane.domain.model.value_objects import Money, normalize_email

# Fields a seller may change through a partial update.
EDITABLE_FIELDS = frozenset(
    {"name", "price", "quantity", "category", "image_url", "origin", "description"}
)

# Fields that are never changed by an edit.
IMMUTABLE_FIELDS = frozenset({"id", "seller_email", "order_count"})


@dataclass
class FoodItem:
    """Aggregate root for a listed food.

    Invariants:
    - ``quantity`` is never negative
    - ``order_count`` never decreases

    Use ``FoodItem.create()`` for new listings. The ``__init__`` stays
    simple so repositories can reconstitute stored rows as-is.
    """

    id: str
    seller_email: str
    name: str
    price: Money
    quantity: int
    order_count: int = 0
    category: str | None = None
    image_url: str | None = None
    origin: str | None = None
    description: str | None = None

    @staticmethod
    def create(
        seller_email: str,
        name: str,
        price: Money,
        quantity: int,
        category: str | None = None,
        image_url: str | None = None,
        origin: str | None = None,
        description: str | None = None,
    ) -> FoodItem:
        """Create a new listing, enforcing all invariants."""
        if not name or not name.strip():
            raise ValidationError("Food name is required")
        _check_stock(quantity)
        return FoodItem(
            id=uuid.uuid4().hex,
            seller_email=normalize_email(seller_email),
            name=name.strip(),
            price=price,
            quantity=quantity,
            category=category,
            image_url=image_url,
            origin=origin,
            description=description,
        )

    def is_sold_by(self, email: str) -> bool:
        return self.seller_email.lower() == email.strip().lower()

    def has_stock_for(self, quantity: int) -> bool:
        return quantity <= self.quantity

    @staticmethod
    def validate_changes(changes: dict[str, Any]) -> dict[str, Any]:
        """Check a partial update and return it normalized.

        Identity fields and the order tally cannot be edited. Prices are
        coerced to ``Money``; quantities must be non-negative integers.
        """
        locked = IMMUTABLE_FIELDS.intersection(changes)
        if locked:
            raise ValidationError(
                f"Cannot change immutable field(s): {', '.join(sorted(locked))}"
            )
        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise ValidationError(f"Unknown food field(s): {', '.join(sorted(unknown))}")

        normalized = dict(changes)
        if "name" in normalized:
            name = normalized["name"]
            if not isinstance(name, str) or not name.strip():
                raise ValidationError("Food name is required")
            normalized["name"] = name.strip()
        if "price" in normalized and not isinstance(normalized["price"], Money):
            normalized["price"] = Money.of(normalized["price"])
        if "quantity" in normalized:
            _check_stock(normalized["quantity"])
        return normalized


def _check_stock(quantity: int) -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError(
            f"Stock quantity must be an integer, got {type(quantity).__name__}"
        )
    if quantity < 0:
        raise ValidationError("Stock quantity cannot be negative")
