"""
Dog repository functions.

Implements create/read/update/delete and the list queries for dog profiles.
Every function takes the caller's session; store errors roll the session back
and propagate unchanged.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from dog_catalog.db import models, schemas

logger = logging.getLogger(__name__)

# Largest value a 64-bit INTEGER primary key can hold
_MAX_ID = 2**63 - 1


def _storable_id(dog_id: Optional[int]) -> bool:
    # Ids outside this range can never have been assigned
    return dog_id is not None and 0 < dog_id <= _MAX_ID


def _newest_first(q):
    # created_at can tie within one clock tick; id keeps insertion order
    return q.order_by(models.Dog.created_at.desc(), models.Dog.id.desc())


def create_dog(db: Session, dog: schemas.DogCreate) -> models.Dog:
    db_dog = models.Dog(
        name=dog.name,
        breed=dog.breed,
        description=dog.description,
        logo_url=dog.logo_url,
        photo_url=dog.photo_url,
        age=dog.age,
        is_featured=dog.is_featured,
    )
    try:
        db.add(db_dog)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("dog_create_failed: name=%s breed=%s", dog.name, dog.breed)
        raise
    db.refresh(db_dog)
    logger.info("dog_created: id=%s name=%s", db_dog.id, db_dog.name)
    return db_dog


def get_dogs(db: Session) -> List[models.Dog]:
    """All dogs, newest first."""
    return _newest_first(db.query(models.Dog)).all()


def get_featured_dogs(db: Session) -> List[models.Dog]:
    return _newest_first(
        db.query(models.Dog).filter(models.Dog.is_featured.is_(True))
    ).all()


def get_dogs_by_breed(db: Session, breed: str) -> List[models.Dog]:
    """Exact, case-sensitive breed match ordered by name."""
    return (
        db.query(models.Dog)
        .filter(models.Dog.breed == breed)
        .order_by(models.Dog.name.asc(), models.Dog.id.asc())
        .all()
    )


def get_dog(db: Session, dog_id: int) -> Optional[models.Dog]:
    if not _storable_id(dog_id):
        return None
    return db.query(models.Dog).filter(models.Dog.id == dog_id).first()


def update_dog(db: Session, dog: schemas.DogUpdate) -> Optional[models.Dog]:
    db_dog = get_dog(db, dog.id)
    if db_dog is None:
        return None
    changes = dog.changes()
    if not changes:
        return db_dog
    for key, value in changes.items():
        setattr(db_dog, key, value)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("dog_update_failed: id=%s fields=%s", dog.id, sorted(changes))
        raise
    db.refresh(db_dog)
    logger.info("dog_updated: id=%s fields=%s", db_dog.id, sorted(changes))
    return db_dog


def delete_dog(db: Session, dog_id: int) -> bool:
    if not _storable_id(dog_id):
        return False
    try:
        db_dog = db.query(models.Dog).filter(models.Dog.id == dog_id).first()
        if db_dog is None:
            return False
        db.delete(db_dog)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("dog_delete_failed: id=%s", dog_id)
        raise
    logger.info("dog_deleted: id=%s", dog_id)
    return True
