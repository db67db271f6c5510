"""Order endpoints. Every route needs a verified caller."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Header, Response

from foodlane.application.list_orders import ListBuyerOrdersHandler
from foodlane.application.place_order import PlaceOrderHandler
from foodlane.application.remove_order import RemoveOrderHandler
from foodlane.domain.model.identity import Identity
from foodlane.infrastructure.api.dependencies import (
    get_container,
    require_identity,
    require_query_subject,
)
from foodlane.infrastructure.api.schemas import OrderCreateRequest, OrderResponse
from foodlane.infrastructure.bootstrap import Container

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("", response_model=list[OrderResponse])
def list_orders(
    identity: Identity = Depends(require_query_subject),
    container: Container = Depends(get_container),
):
    dtos = ListBuyerOrdersHandler(container.uow_factory).handle(identity.email)
    return [OrderResponse.from_dto(d) for d in dtos]


@router.post("", status_code=201, response_model=OrderResponse)
def place_order(
    body: OrderCreateRequest,
    idempotency_key: str | None = Header(default=None),
    identity: Identity = Depends(require_identity),
    container: Container = Depends(get_container),
):
    """Buy ``quantity`` units of a listing as the verified caller.

    ``buyerEmail`` is optional; when sent it must name the caller.
    """
    if body.buyer_email is not None:
        container.gate.ensure_subject(identity, body.buyer_email)

    dto = PlaceOrderHandler(container.uow_factory).handle(
        buyer_email=identity.email,
        food_id=body.food_id,
        quantity=body.quantity,
        idempotency_key=idempotency_key,
    )
    return OrderResponse.from_dto(dto)


@router.delete("/{order_id}", status_code=204)
def delete_order(
    order_id: str,
    identity: Identity = Depends(require_identity),
    container: Container = Depends(get_container),
):
    RemoveOrderHandler(container.uow_factory).handle(order_id)
    return Response(status_code=204)
