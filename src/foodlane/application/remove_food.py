"""Application service: Remove Food use case."""

from __future__ import annotations

from collections.abc import Callable

import structlog

from foodlane.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class RemoveFoodHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, food_id: str) -> bool:
        """Delete a listing. Existing orders keep their snapshots."""
        with self._uow_factory() as uow:
            deleted = uow.foods.delete(food_id)
            uow.commit()

        if deleted:
            logger.info("food_removed", food_id=food_id)
        return deleted
