"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",
    "https://resturent-assignment.web.app",
    "https://resturent-assignment.firebaseapp.com",
)


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_list(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = os.environ.get(name)
    if not raw:
        return default
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    access_token_secret: str
    database_url: str = "sqlite:///data/foodlane.db"
    token_ttl_seconds: int = 3600
    cookie_name: str = "token"
    cookie_secure: bool = True
    cors_origins: tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)
    environment: str = "development"
    log_level: str | None = None
    host: str = "0.0.0.0"
    port: int = 5000

    @staticmethod
    def from_env() -> Settings:
        return Settings(
            access_token_secret=os.environ.get("ACCESS_TOKEN_SECRET", ""),
            database_url=os.environ.get("DATABASE_URL", "sqlite:///data/foodlane.db"),
            token_ttl_seconds=int(os.environ.get("TOKEN_TTL_SECONDS", "3600")),
            cookie_name=os.environ.get("COOKIE_NAME", "token"),
            cookie_secure=_env_bool("COOKIE_SECURE", True),
            cors_origins=_env_list("CORS_ORIGINS", DEFAULT_CORS_ORIGINS),
            environment=os.environ.get("ENVIRONMENT", "development").lower(),
            log_level=os.environ.get("LOG_LEVEL"),
            host=os.environ.get("HOST", "0.0.0.0"),
            port=int(os.environ.get("PORT", "5000")),
        )

    def require_secret(self) -> str:
        """The signing secret; serving or issuing tokens without one is refused."""
        if not self.access_token_secret:
            raise RuntimeError("ACCESS_TOKEN_SECRET must be set")
        return self.access_token_secret
