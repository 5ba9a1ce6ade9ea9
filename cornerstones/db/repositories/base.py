from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from sqlalchemy.orm import Session


TSession = TypeVar("TSession", bound=Session)


@dataclass
class Repository(Generic[TSession]):
    """Base repository bound to the request's SQLAlchemy session.

    Repositories add and flush; committing is left to the service that owns
    the unit of work.
    """

    db: TSession
