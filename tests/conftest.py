from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from infrastructure.db import create_tables


def json_response(payload):
    resp = MagicMock()
    resp.json.return_value = payload
    resp.raise_for_status = lambda: None
    return resp


@pytest.fixture
def http_session():
    """Stand-in for the cached requests session; queue payloads with ``queue``."""
    session = MagicMock()

    def queue(*payloads):
        session.get.side_effect = [json_response(p) for p in payloads]

    session.queue = queue
    return session


@pytest.fixture
def engine(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'gyms.db'}", future=True)
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
