from __future__ import annotations

from collections.abc import Generator
from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from hueprint.config import get_settings

Base = declarative_base()


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    url = get_settings().sqlalchemy_database_uri()
    kwargs: dict = {"future": True}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
    else:
        kwargs["pool_pre_ping"] = True
    return create_engine(url, **kwargs)


@lru_cache(maxsize=1)
def get_session_factory() -> sessionmaker:
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=get_engine(),
        future=True,
    )


def create_all() -> None:
    """Create every registered table; migrations are the path for real deployments."""
    import hueprint.user.models  # noqa: F401

    Base.metadata.create_all(get_engine())


def get_db() -> Generator[Session, None, None]:
    db = get_session_factory()()
    try:
        yield db
    finally:
        db.close()
