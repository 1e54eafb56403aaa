"""
TTS Proxy Route

Exposes the API-key protected synthesis endpoint. All logic lives in
TTSProxyHandler; this module adapts it to FastAPI and wires the real
credential store and upstream client.
"""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response

from voiceos.core.database import engine
from voiceos.core.credentials import CredentialStore, SQLCredentialStore
from voiceos.core.proxy import TTSProxyHandler, HttpSynthesisClient, SynthesisClient

router = APIRouter()


def get_credential_store() -> CredentialStore:
    return SQLCredentialStore(engine)


def get_synthesis_client() -> SynthesisClient:
    return HttpSynthesisClient()


def get_proxy_handler(
    store: CredentialStore = Depends(get_credential_store),
    upstream: SynthesisClient = Depends(get_synthesis_client),
) -> TTSProxyHandler:
    return TTSProxyHandler(store, upstream)


@router.api_route("/tts-proxy", methods=["POST", "OPTIONS"])
async def tts_proxy(request: Request, handler: TTSProxyHandler = Depends(get_proxy_handler)):
    """
    Synthesize speech for an API-key holder.

    Header `x-api-key` is required. Body: `{text, voice_id?, speed?, pitch?}`.
    Returns the upstream provider's JSON verbatim on success.
    """
    body = await request.body()
    result = await handler.handle(request.method, request.headers, body)

    if result.content is None:
        return Response(status_code=result.status_code, headers=result.headers)
    return JSONResponse(status_code=result.status_code, content=result.content, headers=result.headers)
