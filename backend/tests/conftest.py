"""
Shared fixtures: in-memory database, fake upstream, and API clients.
"""
import os
import tempfile

# Must be set before voiceos.core.config is imported
os.environ["VOS_LOG_FILE"] = os.path.join(tempfile.gettempdir(), "voiceos-test.log")
os.environ["VOS_DB_PATH"] = os.path.join(tempfile.gettempdir(), "voiceos-test.db")
os.environ["VOS_JWT_SECRET"] = "test-secret"
os.environ["VOS_JWT_AUDIENCE"] = "authenticated"

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient
from jose import jwt
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from voiceos.core.credentials import SQLCredentialStore
from voiceos.models.api_key import ApiKey

TEST_USER_ID = "user-1"
OTHER_USER_ID = "user-2"


class FakeSynthesisClient:
    """Records payloads and returns a canned result (or raises)."""

    def __init__(self, result: Optional[Dict[str, Any]] = None, error: Optional[Exception] = None):
        self.result = result if result is not None else {
            "success": True,
            "audio_base64": "UklGRiQAAABXQVZF",
            "voice_used": "english_us_male",
            "text_length": 5,
            "generation_time_ms": 120,
        }
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    async def synthesize(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        self.calls.append(payload)
        if self.error:
            raise self.error
        return self.result


@pytest.fixture
def engine():
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def store(engine):
    return SQLCredentialStore(engine)


@pytest.fixture
def upstream():
    return FakeSynthesisClient()


def as_utc(value: datetime) -> datetime:
    """SQLite may hand back naive values; they are UTC."""
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def create_key(engine, user_id: str = TEST_USER_ID, key_name: str = "Default", **fields) -> ApiKey:
    with Session(engine) as session:
        key = ApiKey(user_id=user_id, key_name=key_name, **fields)
        session.add(key)
        session.commit()
        session.refresh(key)
        return key


@pytest.fixture
def api_key(engine):
    return create_key(engine)


def make_token(user_id: str = TEST_USER_ID, **claims) -> str:
    payload = {"sub": user_id, "aud": "authenticated", **claims}
    return jwt.encode(payload, "test-secret", algorithm="HS256")


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {make_token()}"}


@pytest.fixture
def client(engine, store, upstream):
    from voiceos.main import app, api_app
    from voiceos.core.database import get_session
    from voiceos.api.routes_proxy import get_credential_store, get_synthesis_client

    def override_session():
        with Session(engine) as session:
            yield session

    for target in (app, api_app):
        target.dependency_overrides[get_session] = override_session
        target.dependency_overrides[get_credential_store] = lambda: store
        target.dependency_overrides[get_synthesis_client] = lambda: upstream

    yield TestClient(app)

    app.dependency_overrides.clear()
    api_app.dependency_overrides.clear()
