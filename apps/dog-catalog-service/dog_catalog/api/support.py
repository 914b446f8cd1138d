"""
Liveness endpoint.
"""
from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter

from dog_catalog.db import schemas

router = APIRouter(tags=["support"])


@router.get("/healthcheck", response_model=schemas.HealthStatus)
def healthcheck():
    """Report liveness without touching the store."""
    return schemas.HealthStatus(status="ok", timestamp=datetime.now(timezone.utc))
