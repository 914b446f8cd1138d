"""
CRUD operations for ORM models.

Thin facade over the repository modules so API code imports a single module.
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from . import models, schemas
from .repositories import dogs as repo_dogs


def create_dog(db: Session, dog: schemas.DogCreate) -> models.Dog:
    return repo_dogs.create_dog(db, dog)


def get_dogs(db: Session) -> List[models.Dog]:
    return repo_dogs.get_dogs(db)


def get_featured_dogs(db: Session) -> List[models.Dog]:
    return repo_dogs.get_featured_dogs(db)


def get_dogs_by_breed(db: Session, breed: str) -> List[models.Dog]:
    return repo_dogs.get_dogs_by_breed(db, breed)


def get_dog(db: Session, dog_id: int) -> Optional[models.Dog]:
    return repo_dogs.get_dog(db, dog_id)


def update_dog(db: Session, dog: schemas.DogUpdate) -> Optional[models.Dog]:
    return repo_dogs.update_dog(db, dog)


def delete_dog(db: Session, dog_id: int) -> bool:
    return repo_dogs.delete_dog(db, dog_id)
