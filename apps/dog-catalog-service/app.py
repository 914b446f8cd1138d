"""
App assembly entry point.

Exposes the API as `app` for ASGI servers, e.g. ``uvicorn app:app``.
"""

from dog_catalog.api.main import create_app

app = create_app()
