"""
HTML rendering for the catalog page (Jinja2).
"""
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from dog_catalog.presentation.catalog import ALL_BREEDS, CatalogView

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_catalog(view: CatalogView) -> str:
    """Render the full catalog page for a loaded view."""
    template = _env.get_template("catalog.html")
    return template.render(
        dogs=view.dogs,
        featured_dogs=view.featured_dogs,
        filtered_dogs=view.filtered_dogs,
        breeds=view.breeds,
        selected_breed=view.selected_breed,
        all_breeds=ALL_BREEDS,
        using_sample_data=view.using_sample_data,
    )
