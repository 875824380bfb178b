"""FastAPI dependencies resolving objects stored on ``app.state``."""

from fastapi import Request

from persons_api.app.core.config import Settings
from persons_api.app.services.person_store import PersonStore


def get_store(request: Request) -> PersonStore:
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
