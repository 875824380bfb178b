"""
Top‑level package for the Persons API.

The HTTP application lives under ``app`` and can be imported as
``persons_api.app.main``.  A small ``requests`` based client for the
service is available in :mod:`persons_api.client`.
"""

__all__ = []
