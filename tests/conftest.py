"""
Test configuration: in-memory SQLite database and a fake session authenticator.

Settings are read at import time, so the environment is prepared before any
``jotter`` module is imported.
"""
import os

os.environ["JOTTER_DB_URI"] = "sqlite://"
os.environ.setdefault("JOTTER_CORS_ALLOWED_ORIGINS", "http://localhost:3000")
os.environ["JOTTER_OPENAPI_LIST"] = "journals"

from typing import Dict, Optional

import pytest
from fastapi.testclient import TestClient

from jotter import db
from jotter.api import app
from jotter.broodusers import Authenticator
from jotter.journal.api import app as journal_api
from jotter.journal.models import Base

USER_A_TOKEN = "token-a"
USER_B_TOKEN = "token-b"


class FakeAuthenticator(Authenticator):
    def __init__(self, sessions: Dict[str, str]) -> None:
        self.sessions = sessions

    def resolve(self, token: Optional[str]) -> Optional[str]:
        if token is None:
            return None
        return self.sessions.get(token)


def auth_headers(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def db_session():
    Base.metadata.create_all(db.engine)
    session = db.SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(db.engine)


@pytest.fixture
def authenticator():
    previous = journal_api.state.authenticator
    fake = FakeAuthenticator({USER_A_TOKEN: "A", USER_B_TOKEN: "B"})
    journal_api.state.authenticator = fake
    yield fake
    journal_api.state.authenticator = previous


@pytest.fixture
def client(db_session, authenticator):
    with TestClient(app) as test_client:
        yield test_client
    journal_api.dependency_overrides.clear()
