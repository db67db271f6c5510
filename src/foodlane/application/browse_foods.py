"""Application services: read-only catalog queries."""

from __future__ import annotations

from collections.abc import Callable

from foodlane.application.dto import FoodDTO
from foodlane.domain.exceptions import ValidationError
from foodlane.domain.repository.unit_of_work import UnitOfWork

TOP_FOODS_LIMIT = 6


class ShowFoodHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, food_id: str) -> FoodDTO | None:
        with self._uow_factory() as uow:
            food = uow.foods.get_by_id(food_id)
        return FoodDTO.from_domain(food) if food is not None else None


class ListFoodsHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, page: int = 1, size: int = 10) -> list[FoodDTO]:
        """Return one page of the catalog in listing order."""
        if page < 1 or size < 1:
            raise ValidationError("Page and size must be positive")
        with self._uow_factory() as uow:
            foods = uow.foods.list_page(page, size)
        return [FoodDTO.from_domain(f) for f in foods]


class ListSellerFoodsHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, seller_email: str) -> list[FoodDTO]:
        with self._uow_factory() as uow:
            foods = uow.foods.list_by_seller(seller_email.strip().lower())
        return [FoodDTO.from_domain(f) for f in foods]


class TopFoodsHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, limit: int = TOP_FOODS_LIMIT) -> list[FoodDTO]:
        """Most ordered listings first."""
        with self._uow_factory() as uow:
            foods = uow.foods.list_top_ordered(limit)
        return [FoodDTO.from_domain(f) for f in foods]


class CountFoodsHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self) -> int:
        with self._uow_factory() as uow:
            return uow.foods.count()
