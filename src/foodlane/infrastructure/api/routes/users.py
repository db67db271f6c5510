"""User sign-up records."""

from fastapi import APIRouter, Depends

from foodlane.application.register_user import RegisterUserHandler
from foodlane.infrastructure.api.dependencies import get_container
from foodlane.infrastructure.api.schemas import InsertResponse, UserCreateRequest
from foodlane.infrastructure.bootstrap import Container

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", status_code=201, response_model=InsertResponse)
def register_user(body: UserCreateRequest, container: Container = Depends(get_container)):
    user = RegisterUserHandler(container.uow_factory).handle(
        email=body.email, name=body.name, photo_url=body.photo_url
    )
    return InsertResponse(inserted_id=user.email)
