from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from time import perf_counter
from typing import TYPE_CHECKING, Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool

from cornerstones.core.config import settings
from cornerstones.core.metrics import inc_counter, metrics_registry

logger = logging.getLogger(__name__)

if TYPE_CHECKING:  # pragma: no cover - type checking helpers only
    from cornerstones.db.repositories import (
        ClassMaterialRepository,
        ClassroomRepository,
        CompletionRepository,
        MaterialRepository,
        MembershipRepository,
        ProfileRepository,
    )


class Base(DeclarativeBase):
    pass


@dataclass(frozen=True, slots=True)
class DatabaseGateway:
    """Encapsulates engine and session factory lifecycle."""

    engine: Engine
    session_factory: sessionmaker[Session]

    @contextmanager
    def session(self) -> Iterator[Session]:
        started = perf_counter()
        inc_counter("db.session.opens")
        session: Session = self.session_factory()
        try:
            yield session
        finally:
            metrics_registry.record("db.session.duration", (perf_counter() - started) * 1000.0)
            session.close()

    @contextmanager
    def transactional(self) -> Iterator[Session]:
        session: Session = self.session_factory()
        started = perf_counter()
        inc_counter("db.transaction.opens")
        try:
            yield session
            session.commit()
            inc_counter("db.transaction.commits")
        except SQLAlchemyError as e:
            session.rollback()
            inc_counter("db.transaction.rollbacks")
            logger.error("transaction_rollback", extra={"structured_data": {"error": str(e)}})
            raise
        finally:
            metrics_registry.record("db.transaction.duration", (perf_counter() - started) * 1000.0)
            session.close()


def _build_engine() -> Engine:
    url: URL = make_url(settings.database_url)
    kwargs: dict[str, object] = {"echo": False}

    pool_kwargs = {
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_timeout": settings.db_pool_timeout,
        "pool_recycle": settings.db_pool_recycle,
        "pool_pre_ping": settings.db_pool_pre_ping,
    }
    if url.get_backend_name() == "sqlite":
        connect_args: dict[str, object] = {"check_same_thread": False}
        database = url.database or ""
        if database.startswith("file:"):
            connect_args["uri"] = True
        kwargs["connect_args"] = connect_args
        if database in ("", ":memory:", "file::memory:"):
            kwargs["poolclass"] = StaticPool
        else:
            kwargs["poolclass"] = QueuePool
            kwargs.update(pool_kwargs)
    else:
        kwargs.update(pool_kwargs)

    return create_engine(settings.database_url, **kwargs)


engine: Engine = _build_engine()
SessionLocal: sessionmaker[Session] = sessionmaker(bind=engine, autoflush=False, autocommit=False)
database_gateway = DatabaseGateway(engine=engine, session_factory=SessionLocal)


def get_db():
    with database_gateway.session() as session:
        yield session


@contextmanager
def transactional_session() -> Iterator[Session]:
    """Context manager that manages commit/rollback for explicit transactions."""

    with database_gateway.transactional() as session:
        yield session


@dataclass(slots=True)
class RepositoryProvider:
    """Factory for repository instances bound to a specific session."""

    db: Session

    @property
    def profiles(self) -> "ProfileRepository":
        from cornerstones.db.repositories import ProfileRepository

        return ProfileRepository(self.db)

    @property
    def classrooms(self) -> "ClassroomRepository":
        from cornerstones.db.repositories import ClassroomRepository

        return ClassroomRepository(self.db)

    @property
    def memberships(self) -> "MembershipRepository":
        from cornerstones.db.repositories import MembershipRepository

        return MembershipRepository(self.db)

    @property
    def materials(self) -> "MaterialRepository":
        from cornerstones.db.repositories import MaterialRepository

        return MaterialRepository(self.db)

    @property
    def class_materials(self) -> "ClassMaterialRepository":
        from cornerstones.db.repositories import ClassMaterialRepository

        return ClassMaterialRepository(self.db)

    @property
    def completions(self) -> "CompletionRepository":
        from cornerstones.db.repositories import CompletionRepository

        return CompletionRepository(self.db)


__all__ = [
    "Base",
    "database_gateway",
    "engine",
    "SessionLocal",
    "get_db",
    "transactional_session",
    "RepositoryProvider",
]
