from __future__ import annotations

from fastapi import APIRouter

from ..config import get_settings
from ..models.schemas import SystemHealth

router = APIRouter(prefix="/api/v1", tags=["health"])


@router.get("/health", response_model=SystemHealth)
async def health() -> SystemHealth:
    settings = get_settings()
    components = {
        "parser": "ready",
        "ipv6_output": "padded" if settings.ipv6_padded else "compressed",
    }
    return SystemHealth(status="ok", components=components)
