"""Application service: Remove Order use case.

Deleting an order does not give the stock back; the listing keeps its
decremented quantity and its order tally.
"""

from __future__ import annotations

from collections.abc import Callable

import structlog

from foodlane.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class RemoveOrderHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, order_id: str) -> bool:
        with self._uow_factory() as uow:
            deleted = uow.orders.delete(order_id)
            uow.commit()

        if deleted:
            logger.info("order_removed", order_id=order_id)
        return deleted
