"""
SQLAlchemy models.

Exposes `Base`, `now_utc`, and the ORM classes.
"""

from .base import Base, now_utc  # re-export

from .dogs import Dog

__all__ = [
    "Base",
    "now_utc",
    "Dog",
]
