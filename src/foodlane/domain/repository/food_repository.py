"""Abstract repository for the FoodItem aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (SQL, in-memory) live in the
infrastructure layer and the test suite.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from foodlane.domain.model.food import FoodItem


class FoodRepository(ABC):

    @abstractmethod
    def get_by_id(self, food_id: str) -> FoodItem | None:
        """Return a food item by its ID, or None if not found."""

    @abstractmethod
    def list_page(self, page: int, size: int) -> list[FoodItem]:
        """Return one page of food items in insertion order.

        ``page`` is 1-based. Pages past the end are empty.
        """

    @abstractmethod
    def list_by_seller(self, seller_email: str) -> list[FoodItem]:
        """Return every food item listed by a seller."""

    @abstractmethod
    def list_top_ordered(self, limit: int) -> list[FoodItem]:
        """Return the most ordered items, ties in insertion order."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of listed food items."""

    @abstractmethod
    def add(self, food: FoodItem) -> None:
        """Persist a new food item."""

    @abstractmethod
    def update(self, food_id: str, changes: dict[str, Any]) -> bool:
        """Apply already-validated field changes. False if the item is missing."""

    @abstractmethod
    def delete(self, food_id: str) -> bool:
        """Remove a food item. False if it did not exist."""

    @abstractmethod
    def reserve(self, food_id: str, quantity: int) -> None:
        """Atomically take ``quantity`` units off the stock and bump the tally.

        The stock check and the decrement must happen as one step, so two
        concurrent callers can never both succeed against the same units.

        Raises InsufficientStockError when the stock is too low at the
        moment of the write, EntityNotFoundError when the item is gone.
        """
