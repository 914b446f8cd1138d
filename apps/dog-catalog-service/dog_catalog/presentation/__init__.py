"""
Catalog presentation layer: API client, page state, sample data and HTML
rendering.
"""
