"""JWT-based credentials: HS256 tokens signed with the server secret."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from foodlane.domain.exceptions import AuthenticationError, ValidationError
from foodlane.domain.model.identity import Identity
from foodlane.domain.model.value_objects import normalize_email
from foodlane.domain.service.identity_verifier import IdentityVerifier

ALGORITHM = "HS256"
UNAUTHORIZED = "unauthorized access"


class JwtIdentityVerifier(IdentityVerifier):

    def __init__(self, secret: str, algorithm: str = ALGORITHM) -> None:
        self._secret = secret
        self._algorithm = algorithm

    def verify(self, credential: str | None) -> Identity:
        if not credential:
            raise AuthenticationError(UNAUTHORIZED)
        try:
            claims = jwt.decode(
                credential,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp"]},
            )
        except jwt.PyJWTError as exc:
            raise AuthenticationError(UNAUTHORIZED) from exc

        email = claims.get("email")
        if not isinstance(email, str) or not email.strip():
            raise AuthenticationError(UNAUTHORIZED)
        return Identity(email=email.strip().lower(), claims=claims)


class JwtTokenIssuer:
    """Signs a caller-supplied identity claim into a time-limited token."""

    def __init__(self, secret: str, ttl_seconds: int = 3600, algorithm: str = ALGORITHM) -> None:
        self._secret = secret
        self._ttl = timedelta(seconds=ttl_seconds)
        self._algorithm = algorithm

    @property
    def ttl_seconds(self) -> int:
        return int(self._ttl.total_seconds())

    def issue(self, claims: dict[str, Any], now: datetime | None = None) -> str:
        if "email" not in claims:
            raise ValidationError("An email claim is required")
        issued_at = now or datetime.now(timezone.utc)
        payload = dict(claims)
        payload["email"] = normalize_email(payload["email"])
        payload["iat"] = issued_at
        payload["exp"] = issued_at + self._ttl
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)
