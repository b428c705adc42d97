"""Core graph model: identities, column resolution and the graph builder."""

from .columns import resolve_columns
from .errors import ConfigError, MissingColumnError, TagmapError
from .graph import ProductTagGraph, build_graph
from .types import ColumnMap, Edge, Node, NodeGroup, ProductRow

__all__ = [
    "ColumnMap",
    "ConfigError",
    "Edge",
    "MissingColumnError",
    "Node",
    "NodeGroup",
    "ProductRow",
    "ProductTagGraph",
    "TagmapError",
    "build_graph",
    "resolve_columns",
]
