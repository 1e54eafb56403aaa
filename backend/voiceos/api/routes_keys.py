"""
API Key Routes

Dashboard endpoints for listing, creating, toggling and deleting the
signed-in user's API keys.
"""
from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from voiceos.core.auth import get_current_user_id
from voiceos.core.database import get_session
from voiceos.models.api_key import ApiKey, ApiKeyCreate, ApiKeyUpdate, ApiKeyRead

import logging

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_owned_key(session: Session, key_id: str, user_id: str) -> ApiKey:
    key = session.get(ApiKey, key_id)
    # Other users' keys look exactly like missing ones
    if not key or key.user_id != user_id:
        raise HTTPException(status_code=404, detail="API key not found")
    return key


@router.get("/", response_model=list[ApiKeyRead])
def list_keys(session: Session = Depends(get_session), user_id: str = Depends(get_current_user_id)):
    statement = select(ApiKey).where(ApiKey.user_id == user_id).order_by(ApiKey.created_at.desc())
    return session.exec(statement).all()


@router.post("/", response_model=ApiKeyRead)
def create_key(
    data: ApiKeyCreate,
    session: Session = Depends(get_session),
    user_id: str = Depends(get_current_user_id),
):
    key_name = data.key_name.strip()
    if not key_name:
        raise HTTPException(status_code=422, detail="Key name is required")

    key = ApiKey(user_id=user_id, key_name=key_name)
    session.add(key)
    session.commit()
    session.refresh(key)
    logger.info(f"[Keys] Created key {key.id} for user {user_id}")
    return key


@router.patch("/{key_id}", response_model=ApiKeyRead)
def update_key(
    key_id: str,
    data: ApiKeyUpdate,
    session: Session = Depends(get_session),
    user_id: str = Depends(get_current_user_id),
):
    key = _get_owned_key(session, key_id, user_id)
    key.is_active = data.is_active
    session.add(key)
    session.commit()
    session.refresh(key)
    return key


@router.delete("/{key_id}")
def delete_key(key_id: str, session: Session = Depends(get_session), user_id: str = Depends(get_current_user_id)):
    key = _get_owned_key(session, key_id, user_id)
    session.delete(key)
    session.commit()
    logger.info(f"[Keys] Deleted key {key_id} for user {user_id}")
    return {"ok": True}
