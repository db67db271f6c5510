"""Application service: Add Food use case."""

from __future__ import annotations

from collections.abc import Callable

import structlog

from foodlane.domain.model.food import FoodItem
from foodlane.domain.model.value_objects import Money
from foodlane.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class AddFoodHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(
        self,
        seller_email: str,
        name: str,
        price: str,
        quantity: int,
        category: str | None = None,
        image_url: str | None = None,
        origin: str | None = None,
        description: str | None = None,
    ) -> FoodItem:
        """List a new food item for a seller."""
        food = FoodItem.create(
            seller_email=seller_email,
            name=name,
            price=Money.of(price),
            quantity=quantity,
            category=category,
            image_url=image_url,
            origin=origin,
            description=description,
        )
        with self._uow_factory() as uow:
            uow.foods.add(food)
            uow.commit()

        logger.info("food_added", food_id=food.id, seller=food.seller_email)
        return food
