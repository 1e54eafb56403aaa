"""
API Key Model

Opaque credentials callers present to the TTS proxy.
"""
import secrets
import uuid
from datetime import datetime, timezone
from typing import Optional
from sqlmodel import SQLModel, Field


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def generate_api_key() -> str:
    """Generate a new opaque API key."""
    return f"vos_{secrets.token_urlsafe(32)}"


class ApiKey(SQLModel, table=True):
    """API key owned by a dashboard user."""
    __tablename__ = "api_keys"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    user_id: str = Field(index=True)
    key_name: str
    api_key: str = Field(default_factory=generate_api_key, unique=True, index=True)
    is_active: bool = True

    # Usage accounting, written by the proxy
    usage_count: int = 0
    last_used_at: Optional[datetime] = None

    created_at: datetime = Field(default_factory=utc_now)


class ApiKeyCreate(SQLModel):
    key_name: str = Field(min_length=1, max_length=100)


class ApiKeyUpdate(SQLModel):
    is_active: bool


class ApiKeyRead(SQLModel):
    id: str
    key_name: str
    api_key: str
    is_active: bool
    usage_count: int
    last_used_at: Optional[datetime] = None
    created_at: datetime
