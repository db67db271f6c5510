"""Abstract repository for the Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from foodlane.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_idempotency_key(self, buyer_email: str, key: str) -> Order | None:
        """Return the buyer's order recorded under ``key``, or None."""

    @abstractmethod
    def list_by_buyer(self, buyer_email: str) -> list[Order]:
        """Return every order placed by a buyer, oldest first."""

    @abstractmethod
    def add(self, order: Order) -> Order:
        """Persist a new order.

        Raises DuplicateOrderError if the buyer already used the order's
        idempotency key.
        """

    @abstractmethod
    def delete(self, order_id: str) -> bool:
        """Remove an order. False if it did not exist."""
