"""
Service layer.

The only service is the in‑memory person store.  API handlers receive
the store instance through a dependency and never touch its data
directly.
"""
