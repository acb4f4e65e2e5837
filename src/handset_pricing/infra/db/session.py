from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from handset_pricing.infra.config import database_url

# Created on first use so importing this module never needs DATABASE_URL
_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def get_engine() -> Engine:
    """
    Get or create the database engine.

    The catalog is read in full and then cached in-process, so the pool only
    serves occasional snapshot reloads and seed/admin scripts:
    - pool_size / max_overflow: small pool, 5 connections max
    - pool_pre_ping: verify connection health before use
    - pool_recycle: recycle connections after 30 minutes
    """
    global _engine
    if _engine is None:
        _engine = create_engine(
            database_url(),
            pool_size=2,
            max_overflow=3,
            pool_pre_ping=True,
            pool_recycle=1800,
        )
    return _engine


def get_session_factory() -> sessionmaker[Session]:
    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(
            bind=get_engine(),
            class_=Session,
            expire_on_commit=False,
        )
    return _session_factory


@contextmanager
def get_session() -> Iterator[Session]:
    """Session scope with commit on success and rollback on error."""
    session = get_session_factory()()

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
