"""
Core type definitions for tagmap.

Nodes and edges are pydantic models so the emitter can dump them straight
into the vis-network payload. Rows are reduced to a fixed ``ProductRow``
record as soon as the columns are resolved.
"""

import html
from enum import StrEnum
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict

from .identity import normalize


class NodeGroup(StrEnum):
    """The two sides of the bipartite graph."""
    PRODUCT = "product"
    TAG = "tag"


class ColumnMap(BaseModel):
    """
    Actual header strings resolved for each canonical role.

    ``handle`` is None when the export has no Handle column.
    """
    title: str
    tags: str
    handle: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    def extract(self, record: Mapping[Any, Any]) -> "ProductRow":
        """Project a raw CSV record onto the three resolved fields."""
        return ProductRow(
            title=normalize(record.get(self.title)),
            handle=normalize(record.get(self.handle)) if self.handle else "",
            tags=normalize(record.get(self.tags)),
        )


class ProductRow(BaseModel):
    """One CSV record after column resolution. All fields are trimmed strings."""
    title: str = ""
    handle: str = ""
    tags: str = ""

    model_config = ConfigDict(frozen=True)


class Node(BaseModel):
    """
    A product or tag in the graph.

    ``hover`` holds the tooltip markup. It is assembled from escaped
    labels, so CSV content can never inject markup into the page.
    """
    id: str
    label: str
    group: NodeGroup
    hover: str
    shape: str
    value: int = 1
    handle: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def product(cls, node_id: str, title: str, handle: str = "", shape: str = "dot") -> "Node":
        hover = f"<b>Product</b><br/>{html.escape(title)}"
        if handle:
            hover += f"<br/><i>{html.escape(handle)}</i>"
        return cls(
            id=node_id,
            label=title,
            group=NodeGroup.PRODUCT,
            hover=hover,
            shape=shape,
            handle=handle or None,
        )

    @classmethod
    def tag(cls, node_id: str, label: str, shape: str = "diamond") -> "Node":
        return cls(
            id=node_id,
            label=label,
            group=NodeGroup.TAG,
            hover=f"<b>Tag</b><br/>{html.escape(label)}",
            shape=shape,
        )

    @property
    def is_product(self) -> bool:
        return self.group == NodeGroup.PRODUCT

    def to_vis(self) -> Dict[str, Any]:
        """Shape the node the way vis-network expects it (hover text under ``title``)."""
        data: Dict[str, Any] = {
            "id": self.id,
            "label": self.label,
            "title": self.hover,
            "group": self.group.value,
            "shape": self.shape,
            "value": self.value,
        }
        if self.handle:
            data["handle"] = self.handle
        return data


class Edge(BaseModel):
    """Directed product -> tag link."""
    source_id: str
    target_id: str

    model_config = ConfigDict(frozen=True)

    def to_vis(self) -> Dict[str, str]:
        return {"from": self.source_id, "to": self.target_id}
