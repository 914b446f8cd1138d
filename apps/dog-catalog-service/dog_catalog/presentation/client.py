"""
Async client for the dog catalog API.

One method per remote call. Any non-2xx answer raises
``httpx.HTTPStatusError`` and connection problems raise the underlying
``httpx`` transport error; nothing is retried.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx
from pydantic import TypeAdapter

from dog_catalog.db import schemas

logger = logging.getLogger(__name__)

_dog_list = TypeAdapter(List[schemas.Dog])


class DogCatalogClient:
    """Thin wrapper around ``httpx.AsyncClient`` speaking the catalog API."""

    def __init__(
        self,
        base_url: str,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None,
    ):
        # No timeout by default: a hung call keeps the caller waiting
        self._client = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)

    async def __aenter__(self) -> "DogCatalogClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, url: str, **kwargs) -> Any:
        response = await self._client.request(method, url, **kwargs)
        response.raise_for_status()
        return response.json()

    async def healthcheck(self) -> schemas.HealthStatus:
        return schemas.HealthStatus.model_validate(await self._request("GET", "/healthcheck"))

    async def create_dog(self, dog: schemas.DogCreate) -> schemas.Dog:
        data = await self._request("POST", "/dogs/", json=dog.model_dump(mode="json"))
        return schemas.Dog.model_validate(data)

    async def get_dogs(self) -> List[schemas.Dog]:
        return _dog_list.validate_python(await self._request("GET", "/dogs/"))

    async def get_featured_dogs(self) -> List[schemas.Dog]:
        return _dog_list.validate_python(await self._request("GET", "/dogs/featured"))

    async def get_dogs_by_breed(self, breed: str) -> List[schemas.Dog]:
        data = await self._request("GET", "/dogs/by-breed", params={"breed": breed})
        return _dog_list.validate_python(data)

    async def get_dog_by_id(self, dog_id: int) -> Optional[schemas.Dog]:
        data = await self._request("GET", f"/dogs/{dog_id}")
        return schemas.Dog.model_validate(data) if data is not None else None

    async def update_dog(self, update: schemas.DogUpdate) -> Optional[schemas.Dog]:
        # Send only supplied fields so omitted ones stay untouched server-side
        payload: Dict[str, Any] = update.model_dump(mode="json", exclude_unset=True, exclude={"id"})
        data = await self._request("PATCH", f"/dogs/{update.id}", json=payload)
        return schemas.Dog.model_validate(data) if data is not None else None

    async def delete_dog(self, dog_id: int) -> bool:
        return bool(await self._request("DELETE", f"/dogs/{dog_id}"))
