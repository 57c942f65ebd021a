from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter

from timetable_guard.core.config import get_settings

router = APIRouter()


@router.get("/health")
def health() -> dict:
    return {"status": "ok"}


@router.get("/health/live")
def health_live() -> dict:
    return {
        "status": "ok",
        "service": get_settings().project_name,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
