"""Pydantic request/response schemas for the HTTP API.

These are external contracts, separate from the domain model. JSON keys
are camelCase (``sellerEmail``, ``orderCount``, ``buyerEmail``) to match
what the marketplace front end sends and expects.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from foodlane.application.dto import FoodDTO, OrderDTO

# Largest stock or order size a request may carry; fits a 32-bit column.
MAX_QUANTITY = 2**31 - 1


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------
class TokenRequest(ApiModel):
    email: str = Field(min_length=3)
    name: str | None = None


class UserCreateRequest(ApiModel):
    email: str = Field(min_length=3)
    name: str | None = None
    photo_url: str | None = None


class FoodCreateRequest(ApiModel):
    seller_email: str | None = None
    name: str = Field(min_length=1)
    price: Decimal = Field(ge=0)
    quantity: int = Field(ge=0, le=MAX_QUANTITY)
    category: str | None = None
    image_url: str | None = None
    origin: str | None = None
    description: str | None = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "sellerEmail": "seller@example.com",
                    "name": "Chicken Biryani",
                    "price": "12.50",
                    "quantity": 20,
                    "category": "Rice",
                    "origin": "India",
                }
            ]
        },
    )


class FoodUpdateRequest(ApiModel):
    """Partial edit. Identity fields sent by clients are ignored."""

    name: str | None = None
    price: Decimal | None = Field(default=None, ge=0)
    quantity: int | None = Field(default=None, ge=0, le=MAX_QUANTITY)
    category: str | None = None
    image_url: str | None = None
    origin: str | None = None
    description: str | None = None


class OrderCreateRequest(ApiModel):
    food_id: str = Field(min_length=1)
    quantity: int = Field(ge=1, le=MAX_QUANTITY)
    buyer_email: str | None = None


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------
class MessageResponse(ApiModel):
    message: str


class SuccessResponse(ApiModel):
    success: bool = True


class InsertResponse(ApiModel):
    acknowledged: bool = True
    inserted_id: str


class UpdateResponse(ApiModel):
    acknowledged: bool = True
    matched_count: int
    modified_count: int


class CountResponse(ApiModel):
    count: int


class FoodResponse(ApiModel):
    id: str
    seller_email: str
    name: str
    price: str
    quantity: int
    order_count: int
    category: str | None = None
    image_url: str | None = None
    origin: str | None = None
    description: str | None = None

    @staticmethod
    def from_dto(dto: FoodDTO) -> FoodResponse:
        return FoodResponse(
            id=dto.id,
            seller_email=dto.seller_email,
            name=dto.name,
            price=dto.price,
            quantity=dto.quantity,
            order_count=dto.order_count,
            category=dto.category,
            image_url=dto.image_url,
            origin=dto.origin,
            description=dto.description,
        )


class OrderResponse(ApiModel):
    id: str
    buyer_email: str
    food_id: str
    food_name: str
    quantity: int
    unit_price: str
    total: str
    created_at: str

    @staticmethod
    def from_dto(dto: OrderDTO) -> OrderResponse:
        return OrderResponse(
            id=dto.id,
            buyer_email=dto.buyer_email,
            food_id=dto.food_id,
            food_name=dto.food_name,
            quantity=dto.quantity,
            unit_price=dto.unit_price,
            total=dto.total,
            created_at=dto.created_at,
        )
