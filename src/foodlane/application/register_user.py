"""Application service: Register User use case."""

from __future__ import annotations

from collections.abc import Callable

from foodlane.domain.model.user import User
from foodlane.domain.repository.unit_of_work import UnitOfWork


class RegisterUserHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(
        self,
        email: str,
        name: str | None = None,
        photo_url: str | None = None,
    ) -> User:
        """Store a user record. Signing up twice returns the first record."""
        user = User.register(email=email, name=name, photo_url=photo_url)
        with self._uow_factory() as uow:
            existing = uow.users.get_by_email(user.email)
            if existing is not None:
                return existing
            uow.users.add(user)
            uow.commit()
        return user
