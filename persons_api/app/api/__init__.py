"""
HTTP layer of the application.

``router`` aggregates the endpoint routers, ``deps`` provides the
dependencies handing the store and settings to handlers, and
``errors`` translates store errors into HTTP responses.
"""
