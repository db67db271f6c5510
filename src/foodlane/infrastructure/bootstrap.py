"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions and receives its
collaborators explicitly; there is no process-wide storage handle.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from foodlane.application.access_gate import AccessGate
from foodlane.domain.repository.unit_of_work import UnitOfWork
from foodlane.infrastructure.auth.jwt_tokens import JwtIdentityVerifier, JwtTokenIssuer
from foodlane.infrastructure.config import Settings
from foodlane.infrastructure.persistence.sql_unit_of_work import SqlAlchemyUnitOfWork
from foodlane.infrastructure.persistence.tables import metadata


@dataclass
class Container:
    """Everything a surface (HTTP, CLI) needs to serve requests."""

    settings: Settings
    uow_factory: Callable[[], UnitOfWork]
    gate: AccessGate
    issuer: JwtTokenIssuer
    engine: Engine | None = None


def build_engine(database_url: str) -> Engine:
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return create_engine(url, pool_pre_ping=True)

    connect_args = {"check_same_thread": False, "timeout": 30}
    if url.database in (None, "", ":memory:"):
        return create_engine(url, connect_args=connect_args, poolclass=StaticPool)

    Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(url, connect_args=connect_args)


def init_db(engine: Engine) -> None:
    metadata.create_all(engine)


def build_container(settings: Settings) -> Container:
    engine = build_engine(settings.database_url)
    init_db(engine)
    session_factory = sessionmaker(bind=engine, expire_on_commit=False)
    # A StaticPool hands every session the same connection.
    lock = threading.RLock() if isinstance(engine.pool, StaticPool) else None

    return Container(
        settings=settings,
        uow_factory=lambda: SqlAlchemyUnitOfWork(session_factory, lock=lock),
        gate=AccessGate(JwtIdentityVerifier(settings.access_token_secret)),
        issuer=JwtTokenIssuer(
            settings.access_token_secret, ttl_seconds=settings.token_ttl_seconds
        ),
        engine=engine,
    )
