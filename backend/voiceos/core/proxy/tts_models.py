"""
TTS request models.
"""
from typing import Any, Dict, Optional
from pydantic import BaseModel, field_validator

from voiceos.core.config import DEFAULT_VOICE_ID


class SynthesisRequest(BaseModel):
    """
    Outbound synthesis payload, built per call from the inbound body.

    speed and pitch are coerced to numbers ("1.5" is sent as 1.5); values that
    cannot be parsed fail validation. Range is left to the provider.
    """
    text: str
    voice_id: str = DEFAULT_VOICE_ID
    speed: float = 1.0
    pitch: float = 1.0

    @field_validator("speed", "pitch", mode="before")
    @classmethod
    def default_when_falsy(cls, value: Any) -> Any:
        # 0, "" and null all mean "use the default"
        return value or 1.0

    @classmethod
    def from_body(cls, body: Dict[str, Any], default_voice: Optional[str] = None) -> "SynthesisRequest":
        return cls(
            text=body["text"],
            voice_id=body.get("voice_id") or default_voice or DEFAULT_VOICE_ID,
            speed=body.get("speed"),
            pitch=body.get("pitch"),
        )


class DashboardSynthesisRequest(BaseModel):
    """Dashboard "try it" request."""
    text: str
    voice_id: Optional[str] = None
