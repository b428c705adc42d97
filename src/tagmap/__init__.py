"""
tagmap: Product-Tag graph builder.

Turns a Shopify-style product export into a self-contained, interactive
HTML mindmap linking every product to its tags.
"""

__version__ = "0.1.0"
