"""Application service: Update Food use case."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from foodlane.application.dto import UpdateResult
from foodlane.domain.model.food import FoodItem
from foodlane.domain.repository.unit_of_work import UnitOfWork


class UpdateFoodHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, food_id: str, changes: dict[str, Any]) -> UpdateResult:
        """Apply a seller's partial edit to a listing.

        Only the submitted fields are written, so a concurrent
        reservation is never overwritten by a stale copy of the row.
        A missing listing is reported as zero matches, not an error.
        """
        normalized = FoodItem.validate_changes(changes)
        if not normalized:
            with self._uow_factory() as uow:
                found = uow.foods.get_by_id(food_id) is not None
            return UpdateResult(matched_count=int(found), modified_count=0)

        with self._uow_factory() as uow:
            matched = uow.foods.update(food_id, normalized)
            uow.commit()
        return UpdateResult(matched_count=int(matched), modified_count=int(matched))
