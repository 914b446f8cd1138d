"""
Pydantic schemas shared by the API, the repositories and the presentation layer.
"""

from .dogs import Dog, DogBase, DogCreate, DogFilter, DogUpdate, DogUpdateFields
from .support import HealthStatus

__all__ = [
    "DogBase",
    "DogCreate",
    "DogUpdateFields",
    "DogUpdate",
    "DogFilter",
    "Dog",
    "HealthStatus",
]
