import asyncio
import logging
from datetime import datetime, timezone

import httpx
import pytest

from dog_catalog.db import schemas
from dog_catalog.presentation.catalog import ALL_BREEDS, CatalogView
from dog_catalog.presentation.sample_data import SAMPLE_DOGS


def _dog(id, name, breed, is_featured=False):
    return schemas.Dog(
        id=id,
        name=name,
        breed=breed,
        is_featured=is_featured,
        created_at=datetime(2025, 1, id, tzinfo=timezone.utc),
    )


DOGS = [
    _dog(3, "Zeus", "Labrador", is_featured=True),
    _dog(2, "Bolt", "Beagle"),
    _dog(1, "Apollo", "Labrador"),
]


class FakeClient:
    def __init__(self, dogs=DOGS, fail_all=None, fail_featured=None):
        self.dogs = list(dogs)
        self.fail_all = fail_all
        self.fail_featured = fail_featured
        self.calls = []

    async def get_dogs(self):
        self.calls.append("get_dogs")
        if self.fail_all:
            raise self.fail_all
        return list(self.dogs)

    async def get_featured_dogs(self):
        self.calls.append("get_featured_dogs")
        if self.fail_featured:
            raise self.fail_featured
        return [d for d in self.dogs if d.is_featured]


@pytest.mark.asyncio
async def test_load_populates_lists():
    view = CatalogView()
    client = FakeClient()
    await view.load(client)

    assert view.dogs == DOGS
    assert [d.name for d in view.featured_dogs] == ["Zeus"]
    assert view.filtered_dogs == DOGS
    assert view.using_sample_data is False
    assert sorted(client.calls) == ["get_dogs", "get_featured_dogs"]


@pytest.mark.asyncio
async def test_load_issues_both_calls_concurrently():
    started = asyncio.Event()

    class BlockingClient(FakeClient):
        async def get_dogs(self):
            # Completes only if get_featured_dogs starts while this one waits
            await asyncio.wait_for(started.wait(), timeout=1)
            return list(self.dogs)

        async def get_featured_dogs(self):
            started.set()
            return []

    view = CatalogView()
    await view.load(BlockingClient())
    assert view.using_sample_data is False
    assert view.dogs == DOGS


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "client",
    [
        FakeClient(fail_all=httpx.ConnectError("connection refused")),
        FakeClient(fail_featured=RuntimeError("boom")),
        FakeClient(fail_all=ValueError("bad payload"), fail_featured=ValueError("bad payload")),
    ],
)
async def test_load_failure_falls_back_to_sample_data(client, caplog):
    view = CatalogView()
    with caplog.at_level(logging.WARNING, logger="dog_catalog.presentation.catalog"):
        await view.load(client)

    assert view.using_sample_data is True
    assert view.dogs == list(SAMPLE_DOGS)
    assert view.featured_dogs == [d for d in SAMPLE_DOGS if d.is_featured]
    assert view.filtered_dogs == list(SAMPLE_DOGS)
    assert any("sample data" in rec.getMessage() for rec in caplog.records)


@pytest.mark.asyncio
async def test_reload_after_failure_clears_sample_flag():
    view = CatalogView()
    await view.load(FakeClient(fail_all=RuntimeError("down")))
    assert view.using_sample_data is True
    await view.load(FakeClient())
    assert view.using_sample_data is False
    assert view.dogs == DOGS


def test_sample_data_shape():
    assert len(SAMPLE_DOGS) == 8
    assert len({d.id for d in SAMPLE_DOGS}) == 8
    assert [d.name for d in SAMPLE_DOGS if d.is_featured] == ["Buddy", "Max", "Charlie", "Sophie"]
    assert all(d.logo_url and d.photo_url for d in SAMPLE_DOGS)


@pytest.mark.asyncio
async def test_breeds_are_distinct_in_first_seen_order():
    view = CatalogView()
    await view.load(FakeClient())
    assert view.breeds == ["Labrador", "Beagle"]


@pytest.mark.asyncio
async def test_select_breed_filters_locally():
    view = CatalogView()
    client = FakeClient()
    await view.load(client)
    calls_after_load = list(client.calls)

    result = view.select_breed("Labrador")
    assert [d.name for d in result] == ["Zeus", "Apollo"]
    assert view.filtered_dogs == result
    assert view.selected_breed == "Labrador"

    assert view.select_breed("labrador") == []
    assert view.select_breed(ALL_BREEDS) == DOGS
    assert client.calls == calls_after_load


@pytest.mark.asyncio
async def test_selection_survives_reload():
    view = CatalogView()
    view.select_breed("Beagle")
    await view.load(FakeClient())
    assert [d.name for d in view.filtered_dogs] == ["Bolt"]


def test_empty_view_defaults():
    view = CatalogView()
    assert view.breeds == []
    assert view.selected_breed == ALL_BREEDS
    assert view.select_breed("") == []
    assert view.selected_breed == ALL_BREEDS
