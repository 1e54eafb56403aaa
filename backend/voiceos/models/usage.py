"""
Usage Log Model

Records each synthesis attempt that made it past validation.
"""
import uuid
from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime

from voiceos.models.api_key import utc_now


class TTSUsageLog(SQLModel, table=True):
    """Append-only log entry for one synthesis attempt."""
    __tablename__ = "tts_usage_logs"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    user_id: str = Field(index=True)
    api_key_id: Optional[str] = Field(default=None, index=True)  # None for dashboard test synthesis

    # Request info
    text_input: str
    voice_used: str

    # Outcome reported by the upstream provider
    success: bool
    error_message: Optional[str] = None

    created_at: datetime = Field(default_factory=utc_now, index=True)


class TTSUsageLogRead(SQLModel):
    id: str
    api_key_id: Optional[str] = None
    text_input: str
    voice_used: str
    success: bool
    error_message: Optional[str] = None
    created_at: datetime
