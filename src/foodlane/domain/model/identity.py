"""Verified caller identity.

Produced per request from the presented credential and never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Identity:
    email: str
    claims: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def is_subject(self, email: str | None) -> bool:
        """True if ``email`` names this caller."""
        if not email:
            return False
        return self.email.strip().lower() == email.strip().lower()
