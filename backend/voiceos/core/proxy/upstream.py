"""
Upstream Client

Handles making requests to the upstream text-to-speech provider.
"""
import httpx
from typing import Any, Dict, Optional, Protocol

from voiceos.core.config import TTS_UPSTREAM_URL, TTS_TIMEOUT_SECONDS


class SynthesisClient(Protocol):
    async def synthesize(self, payload: Dict[str, Any]) -> Dict[str, Any]: ...


class HttpSynthesisClient:
    """
    Calls the upstream /tts endpoint once per request.

    The provider reports failures in the JSON body (`success: false`, `error`),
    so non-2xx statuses are not raised; the body is returned as-is. Transport
    errors and undecodable bodies propagate to the caller.
    """

    def __init__(
        self,
        url: str = TTS_UPSTREAM_URL,
        timeout: float = TTS_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.timeout = timeout
        self.transport = transport

    async def synthesize(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Send a synthesis request.

        Args:
            payload: `{text, voice_id, speed, pitch}`.

        Returns:
            The provider's JSON object, e.g. `{success, audio_base64, voice_used, ...}`.
        """
        headers = {
            "Content-Type": "application/json",
            "User-Agent": "voiceos/python/1.0",
        }

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.post(self.url, json=payload, headers=headers)

        result = response.json()
        if not isinstance(result, dict):
            raise ValueError(f"Upstream returned non-object JSON (HTTP {response.status_code})")
        return result
