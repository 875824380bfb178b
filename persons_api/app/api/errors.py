"""
Translation of errors into HTTP responses.

Store errors carry no transport information; this module is the one
place where they become status codes.  The body is a JSON object with
a ``detail`` message, the same shape FastAPI uses for ``HTTPException``,
rather than a bare JSON string holding only the message.

Requests that match no route get a small HTML page instead of
FastAPI's default JSON 404.
"""

import logging
from typing import Dict, Type

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import HTMLResponse, JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from persons_api.app.core.errors import ConflictError, LockError, NotFoundError, StoreError

logger = logging.getLogger(__name__)

NOT_FOUND_PAGE = "Oops! The page you are looking for does not exist."

STATUS_BY_ERROR: Dict[Type[StoreError], int] = {
    ConflictError: status.HTTP_409_CONFLICT,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    LockError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(exc: StoreError) -> int:
    for error_type, status_code in STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


async def not_found_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Serve the HTML page for unknown routes, defer everything else."""
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return HTMLResponse(NOT_FOUND_PAGE, status_code=status.HTTP_404_NOT_FOUND)
    return await http_exception_handler(request, exc)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(StarletteHTTPException, not_found_handler)
