"""
Dog profile API endpoints.

One endpoint per catalog operation. Bodies, paths and query parameters are
validated by FastAPI against the dog schemas before a handler runs, so a
malformed request never reaches the repository. Lookups that match nothing
answer ``null`` / ``false`` rather than 404.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from dog_catalog.db import crud, schemas
from dog_catalog.db.database import get_db

router = APIRouter(prefix="/dogs", tags=["dogs"])


@router.post("/", response_model=schemas.Dog, status_code=status.HTTP_201_CREATED)
def create_dog_endpoint(dog: schemas.DogCreate, db: Session = Depends(get_db)):
    return crud.create_dog(db, dog)


@router.get("/", response_model=List[schemas.Dog])
def get_dogs_endpoint(db: Session = Depends(get_db)):
    return crud.get_dogs(db)


@router.get("/featured", response_model=List[schemas.Dog])
def get_featured_dogs_endpoint(db: Session = Depends(get_db)):
    return crud.get_featured_dogs(db)


@router.get("/by-breed", response_model=List[schemas.Dog])
def get_dogs_by_breed_endpoint(
    breed: str = Query(..., description="Exact, case-sensitive breed name"),
    db: Session = Depends(get_db),
):
    return crud.get_dogs_by_breed(db, breed)


@router.get("/{dog_id}", response_model=Optional[schemas.Dog])
def get_dog_endpoint(dog_id: int, db: Session = Depends(get_db)):
    return crud.get_dog(db, dog_id)


@router.patch("/{dog_id}", response_model=Optional[schemas.Dog])
def update_dog_endpoint(
    dog_id: int,
    fields: schemas.DogUpdateFields,
    db: Session = Depends(get_db),
):
    update = schemas.DogUpdate.from_fields(dog_id, fields)
    return crud.update_dog(db, update)


@router.delete("/{dog_id}", response_model=bool)
def delete_dog_endpoint(dog_id: int, db: Session = Depends(get_db)):
    return crud.delete_dog(db, dog_id)
