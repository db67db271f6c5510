"""SQLAlchemy-backed implementation of UserRepository."""

from __future__ import annotations

from datetime import timezone

from sqlalchemy import insert, select
from sqlalchemy.orm import Session

from foodlane.domain.model.user import User
from foodlane.domain.repository.user_repository import UserRepository
from foodlane.infrastructure.persistence.tables import users


class SqlUserRepository(UserRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_email(self, email: str) -> User | None:
        row = self._session.execute(select(users).where(users.c.email == email)).first()
        if row is None:
            return None
        created_at = row.created_at
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return User(
            email=row.email,
            name=row.name,
            photo_url=row.photo_url,
            created_at=created_at,
        )

    def add(self, user: User) -> None:
        self._session.execute(
            insert(users).values(
                email=user.email,
                name=user.name,
                photo_url=user.photo_url,
                created_at=user.created_at,
            )
        )
