"""Credential issuance and logout."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from foodlane.infrastructure.api.dependencies import get_container
from foodlane.infrastructure.api.schemas import SuccessResponse, TokenRequest
from foodlane.infrastructure.bootstrap import Container

router = APIRouter(tags=["auth"])


@router.post("/jwt", response_model=SuccessResponse)
def issue_token(body: TokenRequest, container: Container = Depends(get_container)):
    """Sign the caller's claim into a cookie credential."""
    settings = container.settings
    token = container.issuer.issue(body.model_dump(exclude_none=True))

    response = JSONResponse(content={"success": True})
    response.set_cookie(
        key=settings.cookie_name,
        value=token,
        max_age=container.issuer.ttl_seconds,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="none",
    )
    return response


@router.post("/logout", response_model=SuccessResponse)
def logout(container: Container = Depends(get_container)):
    """Tell the client to stop presenting the credential."""
    settings = container.settings
    response = JSONResponse(content={"success": True})
    response.delete_cookie(
        key=settings.cookie_name,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="none",
    )
    return response
