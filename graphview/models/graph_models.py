"""
Canonical graph data models for graphview.

These models are shared by:
- core: the store, the view state and the engine query surface
- data: the sample dataset and the JSON loader
- visualization: the render adapters that turn engine queries into scenes
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field, model_validator


class NodeType(str, Enum):
    """Closed set of node types known to the application."""
    PERSON = "Person"
    COMPANY = "Company"
    TECHNOLOGY = "Technology"
    PROJECT = "Project"
    COMMUNITY = "Community"
    EVENT = "Event"
    INVESTOR = "Investor"

    def __str__(self) -> str:
        return self.value


class Node(BaseModel):
    """A typed, labeled vertex in the graph."""

    id: str = Field(..., min_length=1, description="Unique, stable identifier")
    label: str = Field(..., description="Human-readable label")
    type: NodeType = Field(..., description="Node type")

    model_config = {"frozen": True, "extra": "forbid"}


class Edge(BaseModel):
    """
    A labeled connection between two node ids.

    Stored directed (source -> target) but treated as undirected by every
    adjacency query.
    """

    source: str = Field(..., description="ID of the source node")
    target: str = Field(..., description="ID of the target node")
    relationship: str = Field(..., description="Free-text relationship label")

    model_config = {"frozen": True, "extra": "forbid"}

    @property
    def id(self) -> str:
        """Readable key; parallel edges share it, renderers make it unique."""
        return f"{self.source}-{self.target}"

    def touches(self, node_id: str) -> bool:
        """Whether ``node_id`` is one of the endpoints."""
        return self.source == node_id or self.target == node_id

    def other_end(self, node_id: str) -> str:
        """Endpoint opposite to ``node_id`` (the node itself for a self-loop)."""
        return self.target if self.source == node_id else self.source


class GraphDataset(BaseModel):
    """
    Static graph handed to the engine at construction time.

    Node ids must be unique. Edges may reference ids that do not exist; such
    edges are kept here and filtered out by the engine's visibility queries.
    """

    nodes: List[Node] = Field(default_factory=list, description="Nodes in display order")
    edges: List[Edge] = Field(default_factory=list, description="Edges in display order")

    model_config = {"frozen": True, "extra": "forbid"}

    @model_validator(mode='after')
    def validate_unique_node_ids(self):
        seen = set()
        duplicates = []
        for node in self.nodes:
            if node.id in seen:
                duplicates.append(node.id)
            seen.add(node.id)
        if duplicates:
            raise ValueError(f"Duplicate node ids: {sorted(set(duplicates))}")
        return self


class NodeDetails(BaseModel):
    """Neighborhood of the selected node, restricted to what is visible."""

    node: Node = Field(..., description="The selected node")
    connections: List[Node] = Field(default_factory=list, description="Visible adjacent nodes")
    relationships: List[Edge] = Field(default_factory=list, description="Visible incident edges")

    model_config = {"frozen": True}
