from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

Base = declarative_base()


def make_engine(database_url: str) -> Engine:
    """Create the engine for ``database_url``.

    ``sqlite://`` (in-memory) shares one connection across threads so the
    scheduler thread and request threads see the same tables.
    """
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, **kwargs)
    return create_engine(database_url, pool_pre_ping=True)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


def init_db(engine: Engine):
    """Create database tables defined on Base subclasses.

    This is a convenience wrapper used at startup. There is no migration
    story; schema changes need a fresh database.
    """
    from . import models  # noqa: F401  register tables on Base

    Base.metadata.create_all(bind=engine)
