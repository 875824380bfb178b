"""
Pydantic schema definitions for API payloads.

Schemas double as the record type held by the store; the store only
ever hands out copies of them.
"""
