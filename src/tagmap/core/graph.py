"""
Product-Tag Graph.

Folds the CSV rows into a bipartite graph in a single pass:

- one node per distinct product id (handle, falling back to title)
- one node per distinct tag id
- one edge per tag mention, duplicates included

Node order is first-encounter order and edge order is append order, so the
same input always serializes to the same document.
"""

import logging
from collections import Counter
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from .identity import DEFAULT_DELIMITER, normalize, product_id, split_tags, tag_id
from .types import ColumnMap, Edge, Node, ProductRow

logger = logging.getLogger(__name__)


class ProductTagGraph:
    """
    In-memory accumulator for the product/tag graph.

    Nodes are keyed by id in an insertion-ordered dict; edges live in a
    plain list. Edges are only ever appended after both endpoints exist.
    """

    def __init__(self, product_shape: str = "dot", tag_shape: str = "diamond"):
        self._nodes: Dict[str, Node] = {}
        self._edges: List[Edge] = []
        self._product_shape = product_shape
        self._tag_shape = tag_shape
        self.product_count = 0
        self.edge_count = 0
        self.skipped_rows = 0

    # =========================================================================
    # Building
    # =========================================================================

    def add_product(self, title: str, handle: str = "") -> str:
        """Register a product (idempotent) and return its id."""
        pid = product_id(title, handle)
        if pid not in self._nodes:
            self._nodes[pid] = Node.product(pid, title, handle, shape=self._product_shape)
            self.product_count += 1
        return pid

    def add_tag(self, label: str) -> str:
        """Register a tag (idempotent) and return its id. The first-seen label wins."""
        tid = tag_id(label)
        if tid not in self._nodes:
            self._nodes[tid] = Node.tag(tid, label, shape=self._tag_shape)
        return tid

    def add_edge(self, source_id: str, target_id: str) -> None:
        """Append a product -> tag edge. Both endpoints must already exist."""
        if source_id not in self._nodes or target_id not in self._nodes:
            raise KeyError(f"Edge endpoints must exist before linking: {source_id} -> {target_id}")
        self._edges.append(Edge(source_id=source_id, target_id=target_id))
        self.edge_count += 1

    def add_row(self, row: ProductRow, delimiter: str = DEFAULT_DELIMITER) -> Optional[str]:
        """
        Fold one resolved row into the graph.

        Returns the product id, or None when the row was skipped because its
        title is empty.
        """
        title = normalize(row.title)
        if not title:
            self.skipped_rows += 1
            return None

        pid = self.add_product(title, normalize(row.handle))
        for label in split_tags(row.tags, delimiter):
            self.add_edge(pid, self.add_tag(label))
        return pid

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def nodes(self) -> List[Node]:
        return list(self._nodes.values())

    @property
    def edges(self) -> List[Edge]:
        return list(self._edges)

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def tag_count(self) -> int:
        return self.node_count - self.product_count

    def get_node(self, node_id: str) -> Optional[Node]:
        return self._nodes.get(node_id)

    def has_node(self, node_id: str) -> bool:
        return node_id in self._nodes

    def tag_degrees(self) -> List[Tuple[Node, int]]:
        """
        Tags ranked by how many edges point at them.

        Ties keep first-encounter order. Tags are only created alongside an
        edge, so every tag has a degree of at least one.
        """
        counts = Counter(edge.target_id for edge in self._edges)
        tags = [n for n in self._nodes.values() if not n.is_product]
        return sorted(((n, counts[n.id]) for n in tags), key=lambda pair: -pair[1])

    def stats(self) -> Dict[str, int]:
        return {
            "products": self.product_count,
            "tags": self.tag_count,
            "edges": self.edge_count,
            "skipped_rows": self.skipped_rows,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the vis-network payload: nodes, edges and summary stats."""
        return {
            "nodes": [n.to_vis() for n in self._nodes.values()],
            "edges": [e.to_vis() for e in self._edges],
            "stats": self.stats(),
        }


def build_graph(
    records: Iterable[Mapping[Any, Any]],
    columns: ColumnMap,
    delimiter: str = DEFAULT_DELIMITER,
    product_shape: str = "dot",
    tag_shape: str = "diamond",
) -> ProductTagGraph:
    """
    Build the product/tag graph from parsed CSV records.

    Args:
        records: Raw CSV records (header -> cell).
        columns: Output of ``resolve_columns``.
        delimiter: Separator used inside the tags cell.
        product_shape: vis-network shape for product nodes.
        tag_shape: vis-network shape for tag nodes.

    Returns:
        The populated ProductTagGraph.
    """
    graph = ProductTagGraph(product_shape=product_shape, tag_shape=tag_shape)

    for index, record in enumerate(records):
        row = columns.extract(record)
        if graph.add_row(row, delimiter) is None:
            logger.debug(f"Skipping row {index + 1}: empty title")

    logger.info(
        f"Built graph: {graph.product_count} products, {graph.tag_count} tags, "
        f"{graph.edge_count} edges ({graph.skipped_rows} rows skipped)"
    )
    return graph
