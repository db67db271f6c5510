"""Catalog endpoints: public reads, authenticated seller writes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from foodlane.application.add_food import AddFoodHandler
from foodlane.application.browse_foods import (
    CountFoodsHandler,
    ListFoodsHandler,
    ListSellerFoodsHandler,
    ShowFoodHandler,
    TopFoodsHandler,
)
from foodlane.application.remove_food import RemoveFoodHandler
from foodlane.application.update_food import UpdateFoodHandler
from foodlane.domain.model.identity import Identity
from foodlane.infrastructure.api.dependencies import get_container, require_identity
from foodlane.infrastructure.api.schemas import (
    CountResponse,
    FoodCreateRequest,
    FoodResponse,
    FoodUpdateRequest,
    InsertResponse,
    UpdateResponse,
)
from foodlane.infrastructure.bootstrap import Container

router = APIRouter(tags=["foods"])

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10


def _positive_int(raw: str | None, default: int) -> int:
    """Lenient query parsing: anything unusable falls back to the default."""
    try:
        value = int(raw) if raw is not None else default
    except ValueError:
        return default
    return value if value >= 1 else default


@router.get("/foods", response_model=list[FoodResponse])
def list_foods(
    page: str | None = None,
    size: str | None = None,
    container: Container = Depends(get_container),
):
    dtos = ListFoodsHandler(container.uow_factory).handle(
        page=_positive_int(page, DEFAULT_PAGE),
        size=_positive_int(size, DEFAULT_PAGE_SIZE),
    )
    return [FoodResponse.from_dto(d) for d in dtos]


@router.get("/foods/user/{email}", response_model=list[FoodResponse])
def list_seller_foods(email: str, container: Container = Depends(get_container)):
    dtos = ListSellerFoodsHandler(container.uow_factory).handle(email)
    return [FoodResponse.from_dto(d) for d in dtos]


@router.get("/foods/{food_id}", response_model=FoodResponse | None)
def get_food(food_id: str, container: Container = Depends(get_container)):
    dto = ShowFoodHandler(container.uow_factory).handle(food_id)
    return FoodResponse.from_dto(dto) if dto is not None else None


@router.get("/count/foods", response_model=CountResponse)
def count_foods(container: Container = Depends(get_container)):
    return CountResponse(count=CountFoodsHandler(container.uow_factory).handle())


@router.get("/top/foods", response_model=list[FoodResponse])
def top_foods(container: Container = Depends(get_container)):
    dtos = TopFoodsHandler(container.uow_factory).handle()
    return [FoodResponse.from_dto(d) for d in dtos]


@router.post("/foods", status_code=201, response_model=InsertResponse)
def add_food(
    body: FoodCreateRequest,
    identity: Identity = Depends(require_identity),
    container: Container = Depends(get_container),
):
    food = AddFoodHandler(container.uow_factory).handle(
        seller_email=body.seller_email or identity.email,
        name=body.name,
        price=str(body.price),
        quantity=body.quantity,
        category=body.category,
        image_url=body.image_url,
        origin=body.origin,
        description=body.description,
    )
    return InsertResponse(inserted_id=food.id)


@router.patch("/foods/{food_id}", response_model=UpdateResponse)
def update_food(
    food_id: str,
    body: FoodUpdateRequest,
    identity: Identity = Depends(require_identity),
    container: Container = Depends(get_container),
):
    result = UpdateFoodHandler(container.uow_factory).handle(
        food_id, body.model_dump(exclude_unset=True)
    )
    return UpdateResponse(
        matched_count=result.matched_count, modified_count=result.modified_count
    )


@router.delete("/foods/{food_id}", status_code=204)
def delete_food(
    food_id: str,
    identity: Identity = Depends(require_identity),
    container: Container = Depends(get_container),
):
    RemoveFoodHandler(container.uow_factory).handle(food_id)
    return Response(status_code=204)
