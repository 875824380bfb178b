"""
Top‑level router.

Aggregates the endpoint routers.  Person routes live under ``/api``;
the landing page and health check sit at the root.
"""

from fastapi import APIRouter

from .endpoints import pages, persons

router = APIRouter()

router.include_router(pages.router, tags=["pages"])
router.include_router(persons.router, prefix="/api", tags=["persons"])
