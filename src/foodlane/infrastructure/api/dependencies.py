"""FastAPI dependencies: container lookup and the AccessGate wiring."""

from __future__ import annotations

from fastapi import Depends, Request

from foodlane.domain.model.identity import Identity
from foodlane.infrastructure.bootstrap import Container


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_credential(request: Request, container: Container = Depends(get_container)) -> str | None:
    """The signed token carried by the request cookie, if any."""
    return request.cookies.get(container.settings.cookie_name)


def require_identity(
    credential: str | None = Depends(get_credential),
    container: Container = Depends(get_container),
) -> Identity:
    """Any authenticated caller."""
    return container.gate.authenticate(credential)


def require_query_subject(
    email: str | None = None,
    credential: str | None = Depends(get_credential),
    container: Container = Depends(get_container),
) -> Identity:
    """An authenticated caller who is the ``email`` named in the query."""
    return container.gate.authorize(credential, email)
