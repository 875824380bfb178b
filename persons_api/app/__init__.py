"""
Application package initializer.

The application is split into a handful of subpackages: ``core`` holds
configuration, logging, the error taxonomy and the read/write lock;
``schemas`` holds the Pydantic models exchanged over HTTP; ``services``
holds the in‑memory record store; ``api`` holds the routers and the
translation of store errors into HTTP responses.
"""

from .main import app  # noqa: F401
