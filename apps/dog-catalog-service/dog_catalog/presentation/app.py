"""
Catalog page server.

Serves the rendered catalog at ``/``. Each page request loads the lists from
the API once; ``breed`` sets the initial selection. Later selections are made
in the page itself against the cards already rendered. Run with
``uvicorn dog_catalog.presentation.app:app``.
"""
import logging
from typing import Callable, Optional

import httpx
from fastapi import FastAPI, Query
from fastapi.responses import HTMLResponse

from dog_catalog.presentation.catalog import ALL_BREEDS, CatalogView
from dog_catalog.presentation.client import DogCatalogClient
from dog_catalog.presentation.rendering import render_catalog
from dog_catalog.utils import settings

logger = logging.getLogger(__name__)


def create_presentation_app(
    api_base_url: Optional[str] = None,
    transport_factory: Optional[Callable[[], httpx.AsyncBaseTransport]] = None,
) -> FastAPI:
    """Build the catalog page app.

    ``transport_factory`` lets callers route API traffic somewhere other than
    the network, e.g. an in-process ``httpx.ASGITransport``.
    """
    base_url = api_base_url or settings.api_base_url()
    app = FastAPI(title="Dog Catalog", docs_url=None, redoc_url=None, openapi_url=None)

    @app.get("/", response_class=HTMLResponse)
    async def catalog_page(breed: str = Query(default=ALL_BREEDS)):
        view = CatalogView()
        transport = transport_factory() if transport_factory else None
        async with DogCatalogClient(base_url, transport=transport) as client:
            await view.load(client)
        view.select_breed(breed)
        return HTMLResponse(render_catalog(view))

    logger.info("catalog_app_ready: api_base_url=%s", base_url)
    return app


app = create_presentation_app()
