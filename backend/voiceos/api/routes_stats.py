"""
Stats API Routes

Provides aggregated usage statistics for the signed-in user's dashboard.
"""
from fastapi import APIRouter, Depends
from sqlmodel import Session, select, func
from datetime import timedelta
from typing import Dict, List, Any

from voiceos.core.auth import get_current_user_id
from voiceos.core.database import get_session
from voiceos.models.api_key import ApiKey, utc_now
from voiceos.models.usage import TTSUsageLog

router = APIRouter(prefix="/stats", tags=["Stats"])


@router.get("/overview")
async def get_overview(
    session: Session = Depends(get_session),
    user_id: str = Depends(get_current_user_id),
) -> Dict[str, Any]:
    """Key counts, cumulative key usage, and request totals."""
    total_keys = session.exec(
        select(func.count(ApiKey.id)).where(ApiKey.user_id == user_id)
    ).one()

    active_keys = session.exec(
        select(func.count(ApiKey.id)).where(ApiKey.user_id == user_id).where(ApiKey.is_active == True)
    ).one()

    total_usage = session.exec(
        select(func.sum(ApiKey.usage_count)).where(ApiKey.user_id == user_id)
    ).one()

    # Requests from the usage log
    total = session.exec(
        select(func.count(TTSUsageLog.id)).where(TTSUsageLog.user_id == user_id)
    ).one()

    success_count = session.exec(
        select(func.count(TTSUsageLog.id))
        .where(TTSUsageLog.user_id == user_id)
        .where(TTSUsageLog.success == True)
    ).one()

    today = utc_now().replace(hour=0, minute=0, second=0, microsecond=0)
    today_count = session.exec(
        select(func.count(TTSUsageLog.id))
        .where(TTSUsageLog.user_id == user_id)
        .where(TTSUsageLog.created_at >= today)
    ).one()

    return {
        "total_keys": total_keys or 0,
        "active_keys": active_keys or 0,
        "total_usage": total_usage or 0,
        "total_requests": total or 0,
        "success_rate": round((success_count / total * 100) if total else 0, 1),
        "today_requests": today_count or 0,
    }


@router.get("/daily")
async def get_daily_stats(
    session: Session = Depends(get_session),
    user_id: str = Depends(get_current_user_id),
) -> List[Dict[str, Any]]:
    """Get daily request counts for the last 7 days."""
    today = utc_now().replace(hour=0, minute=0, second=0, microsecond=0)
    start_date = today - timedelta(days=6)

    days = []
    for i in range(7):
        day = start_date + timedelta(days=i)
        next_day = day + timedelta(days=1)

        count = session.exec(
            select(func.count(TTSUsageLog.id))
            .where(TTSUsageLog.user_id == user_id)
            .where(TTSUsageLog.created_at >= day)
            .where(TTSUsageLog.created_at < next_day)
        ).one()

        days.append({
            "date": day.strftime("%m/%d"),
            "requests": count or 0
        })

    return days


@router.get("/voices")
async def get_voice_stats(
    session: Session = Depends(get_session),
    user_id: str = Depends(get_current_user_id),
) -> List[Dict[str, Any]]:
    """Get request count per voice, most used first."""
    results = session.exec(
        select(TTSUsageLog.voice_used, func.count(TTSUsageLog.id).label("count"))
        .where(TTSUsageLog.user_id == user_id)
        .group_by(TTSUsageLog.voice_used)
        .order_by(func.count(TTSUsageLog.id).desc())
    ).all()

    return [
        {"voice": r[0], "count": r[1]}
        for r in results
    ]
