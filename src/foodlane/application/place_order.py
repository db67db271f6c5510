"""Application service: Place Order use case.

Opens a fresh unit of work per call and hands it to the domain service
(inventory reservation). Rejections are logged and re-raised so the
calling surface can report them.
"""

from __future__ import annotations

from collections.abc import Callable

import structlog

from foodlane.application.dto import OrderDTO
from foodlane.domain.exceptions import DomainException
from foodlane.domain.repository.unit_of_work import UnitOfWork
from foodlane.domain.service.inventory_reservation_service import (
    InventoryReservationService,
)

logger = structlog.get_logger(__name__)


class PlaceOrderHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(
        self,
        buyer_email: str,
        food_id: str,
        quantity: int,
        idempotency_key: str | None = None,
    ) -> OrderDTO:
        svc = InventoryReservationService(self._uow_factory())

        try:
            order = svc.place_order(
                buyer_email=buyer_email,
                food_id=food_id,
                quantity=quantity,
                idempotency_key=idempotency_key,
            )
        except DomainException as exc:
            logger.info(
                "order_rejected",
                reason=type(exc).__name__,
                buyer=buyer_email,
                food_id=food_id,
                quantity=quantity,
            )
            raise

        logger.info(
            "order_placed",
            order_id=order.id,
            buyer=order.buyer_email,
            food_id=order.food_id,
            quantity=order.quantity.value,
        )
        return OrderDTO.from_domain(order)
