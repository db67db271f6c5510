"""Domain service: Inventory Reservation.

Turns a buyer's purchase intent into a stock decrement on the seller's
FoodItem plus a new Order. It lives in the domain layer because the
logic is the core business rule of the marketplace, not just plumbing.

Both writes share one unit of work: either the stock goes down and the
order exists, or neither happened.
"""

from __future__ import annotations

from foodlane.domain.exceptions import (
    DuplicateOrderError,
    EntityNotFoundError,
    InsufficientStockError,
    SelfPurchaseError,
)
from foodlane.domain.model.order import Order
from foodlane.domain.model.value_objects import Quantity, normalize_email
from foodlane.domain.repository.unit_of_work import UnitOfWork


class InventoryReservationService:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def place_order(
        self,
        buyer_email: str,
        food_id: str,
        quantity: int,
        idempotency_key: str | None = None,
    ) -> Order:
        """Reserve stock and record the order in a single transaction.

        Steps:
          1. Replay: a known idempotency key returns the stored order.
          2. Load the food and check the buyer rules against it
             (missing food, self purchase, visible stock).
          3. Reserve through the repository, which re-checks the stock
             inside the same write so concurrent buyers cannot oversell.
          4. Record the order and commit both changes together.
        """
        buyer = normalize_email(buyer_email)
        qty = Quantity(quantity)

        with self._uow as uow:
            if idempotency_key:
                existing = uow.orders.get_by_idempotency_key(buyer, idempotency_key)
                if existing is not None:
                    return existing

            food = uow.foods.get_by_id(food_id)
            if food is None:
                raise EntityNotFoundError(f"Food '{food_id}' not found")
            if food.is_sold_by(buyer):
                raise SelfPurchaseError("You cannot buy your own food")
            if not food.has_stock_for(qty.value):
                raise InsufficientStockError(
                    f"Not enough food (need {qty.value}, have {food.quantity} available)"
                )

            order = Order.place(food, buyer, qty, idempotency_key=idempotency_key)
            uow.foods.reserve(food.id, qty.value)
            try:
                uow.orders.add(order)
            except DuplicateOrderError:
                # A concurrent retry with the same key committed first.
                uow.rollback()
                existing = uow.orders.get_by_idempotency_key(buyer, idempotency_key)
                if existing is None:
                    raise
                return existing
            uow.commit()
            return order
