"""Abstract repository for marketplace users."""

from __future__ import annotations

from abc import ABC, abstractmethod

from foodlane.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def get_by_email(self, email: str) -> User | None:
        """Return a user by email, or None."""

    @abstractmethod
    def add(self, user: User) -> None:
        """Persist a new user."""
