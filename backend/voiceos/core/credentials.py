"""
Credential Store

Storage contract used by the TTS proxy, plus its SQLModel implementation.

The three operations are independent: each opens its own session and commits
on its own, so no transaction spans the lookup, the log insert and the
counter update.
"""
from datetime import datetime
from typing import Optional, Protocol
from sqlalchemy.engine import Engine
from sqlmodel import Session, select

from voiceos.models.api_key import ApiKey
from voiceos.models.usage import TTSUsageLog

import logging

logger = logging.getLogger(__name__)


class CredentialStore(Protocol):
    def find_active_key(self, api_key: str) -> Optional[ApiKey]: ...

    def insert_usage_log(
        self,
        user_id: str,
        api_key_id: Optional[str],
        text_input: str,
        voice_used: str,
        success: bool,
        error_message: Optional[str] = None,
    ) -> TTSUsageLog: ...

    def record_key_usage(self, key_id: str, usage_count: int, last_used_at: datetime) -> None: ...


class SQLCredentialStore:
    """CredentialStore backed by the SQLModel engine."""

    def __init__(self, engine: Engine):
        self.engine = engine

    def find_active_key(self, api_key: str) -> Optional[ApiKey]:
        """
        Look up a key by exact secret match, restricted to active keys.

        Unknown and deactivated keys both return None from the same query.
        """
        with Session(self.engine) as session:
            statement = select(ApiKey).where(ApiKey.api_key == api_key, ApiKey.is_active == True)
            return session.exec(statement).first()

    def insert_usage_log(
        self,
        user_id: str,
        api_key_id: Optional[str],
        text_input: str,
        voice_used: str,
        success: bool,
        error_message: Optional[str] = None,
    ) -> TTSUsageLog:
        with Session(self.engine) as session:
            log_entry = TTSUsageLog(
                user_id=user_id,
                api_key_id=api_key_id,
                text_input=text_input,
                voice_used=voice_used,
                success=success,
                error_message=error_message,
            )
            session.add(log_entry)
            session.commit()
            session.refresh(log_entry)
            return log_entry

    def record_key_usage(self, key_id: str, usage_count: int, last_used_at: datetime) -> None:
        """Write the counter value computed by the caller; not an atomic increment."""
        with Session(self.engine) as session:
            key = session.get(ApiKey, key_id)
            if not key:
                # Deleted from the dashboard mid-request
                logger.warning(f"[CredentialStore] API key {key_id} vanished before usage update")
                return
            key.usage_count = usage_count
            key.last_used_at = last_used_at
            session.add(key)
            session.commit()
