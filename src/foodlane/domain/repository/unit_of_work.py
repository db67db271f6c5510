"""Abstract unit of work: one all-or-nothing storage transaction.

Everything done through ``foods``, ``orders`` and ``users`` inside a
``with uow:`` block becomes durable only on ``commit()``. Leaving the
block without committing, or through an exception, rolls it all back.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from foodlane.domain.repository.food_repository import FoodRepository
from foodlane.domain.repository.order_repository import OrderRepository
from foodlane.domain.repository.user_repository import UserRepository


class UnitOfWork(ABC):

    foods: FoodRepository
    orders: OrderRepository
    users: UserRepository

    def __enter__(self) -> UnitOfWork:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.rollback()

    @abstractmethod
    def commit(self) -> None:
        """Make every change since the block opened durable."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard every uncommitted change. Safe to call after commit."""
