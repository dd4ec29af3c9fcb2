from contextlib import contextmanager
from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.orm import scoped_session, sessionmaker

from core.config import load_settings


@lru_cache(maxsize=None)
def get_engine(database_url: str | None = None):
    """Engine for ``database_url``, falling back to ``DATABASE_URL`` from the environment."""
    url = database_url or load_settings().database_url
    return create_engine(url, pool_pre_ping=True, future=True)


@lru_cache(maxsize=None)
def get_session_factory(database_url: str | None = None):
    return scoped_session(
        sessionmaker(bind=get_engine(database_url), autoflush=False, expire_on_commit=False)
    )


@contextmanager
def get_session(session_factory=None):
    session = (session_factory or get_session_factory())()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
