"""
Dog profile schemas.

`DogCreate`, `DogUpdate` and `DogFilter` are the input shapes accepted at the
API boundary; `Dog` is the shape returned to callers.

Update fields are three-state. A field the caller omits is absent from
``model_fields_set`` and must be left untouched; a field sent as ``null`` is
present with value ``None`` and clears the stored value. `DogUpdate.changes()`
exposes exactly the supplied fields so the repository never has to guess.
"""
from datetime import datetime
from typing import Annotated, Any, Dict, Optional

from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    PositiveInt,
    StringConstraints,
    TypeAdapter,
    field_validator,
)

_url_adapter = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    # Validate only; the caller's text is stored as given
    _url_adapter.validate_python(value)
    return value


UrlStr = Annotated[str, AfterValidator(_check_url)]
NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]


class DogBase(BaseModel):
    name: NonEmptyStr
    breed: NonEmptyStr
    description: Optional[str] = None
    logo_url: Optional[UrlStr] = None
    photo_url: Optional[UrlStr] = None
    age: Optional[PositiveInt] = None


class DogCreate(DogBase):
    is_featured: bool = False


class DogUpdateFields(BaseModel):
    name: Optional[NonEmptyStr] = None
    breed: Optional[NonEmptyStr] = None
    description: Optional[str] = None
    logo_url: Optional[UrlStr] = None
    photo_url: Optional[UrlStr] = None
    age: Optional[PositiveInt] = None
    is_featured: Optional[bool] = None

    @field_validator("name", "breed", "is_featured")
    @classmethod
    def _reject_explicit_null(cls, value):
        # Only runs for supplied values; these columns cannot be cleared
        if value is None:
            raise ValueError("field may be omitted but not set to null")
        return value

    def changes(self) -> Dict[str, Any]:
        """Return only the fields the caller supplied, explicit nulls included."""
        return self.model_dump(exclude_unset=True, exclude={"id"})


class DogUpdate(DogUpdateFields):
    id: int

    @classmethod
    def from_fields(cls, dog_id: int, fields: DogUpdateFields) -> "DogUpdate":
        """Bind a path id to a request body without marking omitted fields as set."""
        return cls(id=dog_id, **fields.model_dump(exclude_unset=True))


class DogFilter(BaseModel):
    """Filter contract. No query currently applies these fields."""

    breed: Optional[str] = None
    is_featured: Optional[bool] = None
    limit: int = Field(default=20, gt=0)
    offset: int = Field(default=0, ge=0)


class Dog(BaseModel):
    id: int
    name: str
    breed: str
    description: Optional[str] = None
    logo_url: Optional[str] = None
    photo_url: Optional[str] = None
    age: Optional[int] = None
    is_featured: bool = False
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)
