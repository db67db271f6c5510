"""Application service: List Orders use case (query)."""

from __future__ import annotations

from collections.abc import Callable

from foodlane.application.dto import OrderDTO
from foodlane.domain.model.value_objects import normalize_email
from foodlane.domain.repository.unit_of_work import UnitOfWork


class ListBuyerOrdersHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, buyer_email: str) -> list[OrderDTO]:
        with self._uow_factory() as uow:
            orders = uow.orders.list_by_buyer(normalize_email(buyer_email))
        return [OrderDTO.from_domain(o) for o in orders]
