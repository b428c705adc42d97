"""HTML rendering of the product/tag graph."""

from .html import generate_html, open_in_browser, write_html

__all__ = ["generate_html", "open_in_browser", "write_html"]
