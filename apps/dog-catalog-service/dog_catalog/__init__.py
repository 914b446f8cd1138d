"""Dog catalog service: profile API, persistence and catalog page."""

__version__ = "1.0.0"
