from contextlib import contextmanager

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import Session, SQLModel, create_engine

from .config import DATABASE_URL

# Import all models to ensure they are registered with SQLModel metadata
from .models import Task  # noqa: F401


def make_engine(url: str = DATABASE_URL, **kwargs) -> Engine:
    if url.startswith("sqlite"):
        connect_args = kwargs.pop("connect_args", {})
        connect_args.setdefault("check_same_thread", False)
        return create_engine(url, echo=False, connect_args=connect_args, **kwargs)

    return create_engine(url, echo=False, pool_pre_ping=True, **kwargs)


engine = make_engine()


def session_factory(bind: Engine) -> sessionmaker:
    return sessionmaker(
        bind=bind,
        class_=Session,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )


@contextmanager
def get_session(factory: sessionmaker):
    """Get a database session (context manager style).

    Usage:
        with get_session(session_factory(engine)) as session:
            # do something with session
    """
    session = factory()
    try:
        yield session
    finally:
        session.close()


def create_tables(bind: Engine = engine) -> None:
    """Create all database tables."""
    SQLModel.metadata.create_all(bind=bind)
