# app\adapters\api\routers\system.py
import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import PlainTextResponse

from app.shared.config import Settings, settings

router = APIRouter(tags=["System"])

def get_settings() -> Settings:
    return settings

@router.get("/", response_class=PlainTextResponse, status_code=status.HTTP_200_OK)
async def root(cfg: Settings = Depends(get_settings)) -> str:
    """
    Liveness message.
    Returns 200 with a plain-text banner if the process is serving requests.
    """
    return cfg.ROOT_MESSAGE

@router.get("/health", status_code=status.HTTP_200_OK)
async def health(request: Request) -> dict:
    """
    Health probe.
    Reports uptime (seconds since the app was created) and the current UTC time.
    """
    started_at = getattr(request.app.state, "started_at", None)
    uptime = time.monotonic() - started_at if started_at is not None else 0.0
    return {
        "status": "OK",
        "uptime": round(uptime, 3),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
