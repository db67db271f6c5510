"""User record: a marketplace member as stored after sign-up."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from foodlane.domain.model.value_objects import normalize_email


@dataclass
class User:

    email: str
    name: str | None = None
    photo_url: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def register(email: str, name: str | None = None, photo_url: str | None = None) -> User:
        return User(email=normalize_email(email), name=name, photo_url=photo_url)
