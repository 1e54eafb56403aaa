"""
Usage & Playground Routes

Recent usage history, the voice catalogue, and the dashboard's
"try it" synthesis for the signed-in user.
"""
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session, select
from typing import Any, Dict, List

from voiceos.core.auth import get_current_user_id
from voiceos.core.config import DEFAULT_VOICE_ID
from voiceos.core.credentials import CredentialStore
from voiceos.core.database import get_session
from voiceos.core.proxy import DashboardSynthesisRequest, SynthesisRequest, SynthesisClient, VOICES, Voice
from voiceos.models.usage import TTSUsageLog, TTSUsageLogRead
from voiceos.api.routes_proxy import get_credential_store, get_synthesis_client

import logging

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/usage", response_model=list[TTSUsageLogRead])
def list_usage(
    limit: int = Query(10, ge=1, le=100),
    session: Session = Depends(get_session),
    user_id: str = Depends(get_current_user_id),
):
    """Latest usage log entries for the current user, newest first."""
    statement = (
        select(TTSUsageLog)
        .where(TTSUsageLog.user_id == user_id)
        .order_by(TTSUsageLog.created_at.desc())
        .limit(limit)
    )
    return session.exec(statement).all()


@router.get("/voices", response_model=List[Voice])
async def list_voices():
    return VOICES


@router.post("/tts/test")
async def try_synthesis(
    data: DashboardSynthesisRequest,
    user_id: str = Depends(get_current_user_id),
    store: CredentialStore = Depends(get_credential_store),
    upstream: SynthesisClient = Depends(get_synthesis_client),
) -> Dict[str, Any]:
    """
    Synthesize a sample for the signed-in user.

    Logged like a proxied call but without an API key, so no counter moves.
    """
    if not data.text.strip():
        raise HTTPException(status_code=400, detail="Text is required")

    synthesis = SynthesisRequest(text=data.text, voice_id=data.voice_id or DEFAULT_VOICE_ID)

    try:
        result = await upstream.synthesize(synthesis.model_dump())
    except Exception as e:
        logger.warning(f"[Playground] Upstream call failed: {e}")
        raise HTTPException(status_code=502, detail=f"Upstream error: {e}")

    error = result.get("error")
    store.insert_usage_log(
        user_id=user_id,
        api_key_id=None,
        text_input=synthesis.text,
        voice_used=synthesis.voice_id,
        success=bool(result.get("success")),
        error_message=str(error) if error else None,
    )
    return result
