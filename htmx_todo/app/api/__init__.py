"""
HTTP layer of the application.

``router`` aggregates the endpoint modules under ``endpoints`` and is
included by ``main.create_app``.  ``deps`` provides the FastAPI
dependencies the endpoints use to reach application state.
"""
