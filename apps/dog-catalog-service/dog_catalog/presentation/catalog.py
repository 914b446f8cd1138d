"""
Catalog page state.

`CatalogView` holds what one catalog page shows: the full list, the featured
list and the breed-filtered subset. ``load`` fetches the two lists together;
if either call fails the whole view switches to the bundled sample set so the
page is never empty. Breed filtering only re-slices the loaded list.
"""
from __future__ import annotations

import asyncio
import logging
from typing import List, Sequence

from dog_catalog.db import schemas
from dog_catalog.presentation.client import DogCatalogClient
from dog_catalog.presentation.sample_data import SAMPLE_DOGS

logger = logging.getLogger(__name__)

ALL_BREEDS = "all"


class CatalogView:
    def __init__(self) -> None:
        self.dogs: List[schemas.Dog] = []
        self.featured_dogs: List[schemas.Dog] = []
        self.filtered_dogs: List[schemas.Dog] = []
        self.selected_breed: str = ALL_BREEDS
        self.using_sample_data: bool = False

    async def load(self, client: DogCatalogClient) -> None:
        """Fetch all and featured dogs concurrently, falling back to sample data."""
        try:
            all_dogs, featured = await asyncio.gather(
                client.get_dogs(),
                client.get_featured_dogs(),
            )
        except Exception as exc:
            logger.warning("Catalog API not available, using sample data: %s", exc)
            self._populate(SAMPLE_DOGS, [dog for dog in SAMPLE_DOGS if dog.is_featured])
            self.using_sample_data = True
        else:
            self._populate(all_dogs, featured)
            self.using_sample_data = False

    def _populate(self, dogs: Sequence[schemas.Dog], featured: Sequence[schemas.Dog]) -> None:
        self.dogs = list(dogs)
        self.featured_dogs = list(featured)
        self._apply_filter()

    @property
    def breeds(self) -> List[str]:
        """Distinct breeds of the loaded dogs, in first-seen order."""
        return list(dict.fromkeys(dog.breed for dog in self.dogs))

    def select_breed(self, breed: str) -> List[schemas.Dog]:
        self.selected_breed = breed or ALL_BREEDS
        return self._apply_filter()

    def _apply_filter(self) -> List[schemas.Dog]:
        if self.selected_breed == ALL_BREEDS:
            self.filtered_dogs = list(self.dogs)
        else:
            self.filtered_dogs = [dog for dog in self.dogs if dog.breed == self.selected_breed]
        return self.filtered_dogs
