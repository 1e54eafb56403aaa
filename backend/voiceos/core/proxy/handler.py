"""
TTS Proxy Handler

Authenticates a caller by API key, forwards the synthesis request upstream,
records a usage log entry and bumps the key's usage counter.

Framework-agnostic: takes the method, headers and raw body and returns a
ProxyResponse, so the FastAPI route stays a thin adapter and tests can inject
a fake store and upstream client.
"""
import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, Mapping, Optional

from pydantic import ValidationError

from voiceos.core.config import DEFAULT_VOICE_ID
from voiceos.core.credentials import CredentialStore
from voiceos.models.api_key import utc_now
from .tts_models import SynthesisRequest
from .upstream import SynthesisClient

logger = logging.getLogger(__name__)

API_KEY_HEADER = "x-api-key"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type, x-api-key",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}


@dataclass
class ProxyResponse:
    """Status, JSON content (None for an empty body) and headers."""
    status_code: int
    content: Optional[Dict[str, Any]] = None
    headers: Dict[str, str] = field(default_factory=lambda: dict(CORS_HEADERS))


def _error(status_code: int, message: str) -> ProxyResponse:
    return ProxyResponse(status_code=status_code, content={"error": message})


def _get_header(headers: Mapping[str, str], name: str) -> Optional[str]:
    # Starlette headers are case-insensitive already; plain dicts are not
    value = headers.get(name)
    if value is None:
        for key, candidate in headers.items():
            if key.lower() == name:
                return candidate
    return value


class TTSProxyHandler:
    """Request handler for the TTS proxy endpoint."""

    def __init__(
        self,
        store: CredentialStore,
        upstream: SynthesisClient,
        default_voice: str = DEFAULT_VOICE_ID,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.store = store
        self.upstream = upstream
        self.default_voice = default_voice
        self.clock = clock

    async def handle(self, method: str, headers: Mapping[str, str], body: bytes) -> ProxyResponse:
        """
        Process one proxy request.

        Never raises: unexpected errors become a 500 carrying the exception
        message. Side effects already performed are not rolled back.
        """
        method = method.upper()

        # CORS preflight
        if method == "OPTIONS":
            return ProxyResponse(status_code=200)

        if method != "POST":
            return _error(405, "Method not allowed")

        try:
            return await self._process(headers, body)
        except Exception as e:
            logger.exception(f"[TTSProxy] Unexpected error: {e}")
            return _error(500, str(e))

    async def _process(self, headers: Mapping[str, str], body: bytes) -> ProxyResponse:
        # 1. Credential
        api_key = _get_header(headers, API_KEY_HEADER)
        if not api_key:
            logger.info("[TTSProxy] Rejected request without API key")
            return _error(401, "API key required")

        key = self.store.find_active_key(api_key)
        if not key:
            logger.info("[TTSProxy] Rejected request with invalid API key")
            return _error(401, "Invalid API key")

        # 2. Payload
        try:
            payload = json.loads(body or b"")
        except ValueError:
            return _error(400, "Invalid JSON body")

        if not isinstance(payload, dict):
            return _error(400, "Text is required")

        text = payload.get("text")
        if not text or not isinstance(text, str):
            return _error(400, "Text is required")

        try:
            synthesis = SynthesisRequest.from_body(payload, default_voice=self.default_voice)
        except ValidationError as e:
            return _error(400, f"Invalid request: {e.errors()[0]['msg']}")

        # 3. Upstream (single attempt)
        result = await self.upstream.synthesize(synthesis.model_dump())
        success = bool(result.get("success"))
        error = result.get("error")
        error_message = str(error) if error else None
        if not success:
            logger.warning(f"[TTSProxy] Upstream failure for key {key.id}: {error_message}")

        # 4. Usage log, then counter; both regardless of upstream outcome
        self.store.insert_usage_log(
            user_id=key.user_id,
            api_key_id=key.id,
            text_input=synthesis.text,
            voice_used=synthesis.voice_id,
            success=success,
            error_message=error_message,
        )
        self.store.record_key_usage(
            key.id,
            usage_count=(key.usage_count or 0) + 1,
            last_used_at=self.clock(),
        )

        logger.info(f"[TTSProxy] key={key.id} voice={synthesis.voice_id} chars={len(synthesis.text)} success={success}")

        # 5. Upstream body verbatim
        return ProxyResponse(status_code=200, content=result)
