"""SQLAlchemy unit of work: one session, one transaction per block."""

from __future__ import annotations

import threading

from sqlalchemy.orm import Session, sessionmaker

from foodlane.domain.repository.unit_of_work import UnitOfWork
from foodlane.infrastructure.persistence.sql_food_repository import SqlFoodRepository
from foodlane.infrastructure.persistence.sql_order_repository import SqlOrderRepository
from foodlane.infrastructure.persistence.sql_user_repository import SqlUserRepository


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Session-per-block unit of work.

    ``lock`` is held from ``__enter__`` to ``__exit__`` when given. Engines
    whose sessions all share one DBAPI connection (in-memory SQLite) pass
    one, so only one transaction is open on that connection at a time.
    """

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        lock: threading.RLock | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._lock = lock
        self._session: Session | None = None

    def __enter__(self) -> SqlAlchemyUnitOfWork:
        if self._lock is not None:
            self._lock.acquire()
        try:
            self._session = self._session_factory()
        except BaseException:
            self._release()
            raise
        self.foods = SqlFoodRepository(self._session)
        self.orders = SqlOrderRepository(self._session)
        self.users = SqlUserRepository(self._session)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self.rollback()
        finally:
            self._session.close()
            self._session = None
            self._release()

    def commit(self) -> None:
        self._session.commit()

    def rollback(self) -> None:
        self._session.rollback()

    def _release(self) -> None:
        if self._lock is not None:
            self._lock.release()
