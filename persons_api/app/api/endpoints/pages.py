"""
Landing page and health check.

Neither route touches the person store.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse

from persons_api.app.api.deps import get_settings
from persons_api.app.core.config import Settings

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def landing_page(settings: Settings = Depends(get_settings)) -> str:
    """Greeting together with the current UTC time."""
    current_time = datetime.now(timezone.utc).isoformat()
    return f"{settings.project_name} {settings.greeting_text} <br> Current UTC time: {current_time}"


@router.get("/health", response_class=PlainTextResponse)
async def health() -> str:
    return "OK"
