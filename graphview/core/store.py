"""
Read-only store for the canonical node and edge collections.

The store answers identity and adjacency queries. Edges are directed in
storage but every adjacency query treats them as undirected. Lookups on ids
that do not exist return ``None`` or empty collections.
"""

from typing import Dict, List, Optional, Set

from ..models.graph_models import Edge, GraphDataset, Node, NodeType


class GraphStore:
    """
    Immutable holder of a graph dataset.

    Indexes are built once at construction; nothing mutates the store
    afterwards, so a single instance can back any number of engines.
    """

    def __init__(self, dataset: GraphDataset):
        self._nodes: List[Node] = list(dataset.nodes)
        self._edges: List[Edge] = list(dataset.edges)

        self._nodes_by_id: Dict[str, Node] = {node.id: node for node in self._nodes}
        self._node_positions: Dict[str, int] = {node.id: i for i, node in enumerate(self._nodes)}

        # node id -> positions of incident edges, in dataset order
        self._incident_edges: Dict[str, List[int]] = {}
        for index, edge in enumerate(self._edges):
            self._incident_edges.setdefault(edge.source, []).append(index)
            if edge.target != edge.source:
                self._incident_edges.setdefault(edge.target, []).append(index)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: str) -> bool:
        return node_id in self._nodes_by_id

    # ========== Identity ==========

    def all_nodes(self) -> List[Node]:
        """All nodes in construction order."""
        return list(self._nodes)

    def all_edges(self) -> List[Edge]:
        """All edges in construction order."""
        return list(self._edges)

    def node_by_id(self, node_id: Optional[str]) -> Optional[Node]:
        """Get a node by its ID."""
        if node_id is None:
            return None
        return self._nodes_by_id.get(node_id)

    def nodes_by_type(self, node_type: NodeType) -> List[Node]:
        """All nodes of one type, in construction order."""
        return [node for node in self._nodes if node.type == node_type]

    def unique_types_present(self) -> List[NodeType]:
        """Distinct node types in first-seen order."""
        types: List[NodeType] = []
        for node in self._nodes:
            if node.type not in types:
                types.append(node.type)
        return types

    # ========== Adjacency ==========

    def relationships_of(self, node_id: str) -> List[Edge]:
        """All edges where ``node_id`` is source or target, in dataset order."""
        return [self._edges[i] for i in self._incident_edges.get(node_id, [])]

    def neighbor_ids(self, node_id: str) -> Set[str]:
        """IDs of existing nodes one edge away from ``node_id``, excluding itself."""
        neighbors = set()
        for edge in self.relationships_of(node_id):
            other = edge.other_end(node_id)
            if other != node_id and other in self._nodes_by_id:
                neighbors.add(other)
        return neighbors

    def connected_nodes(self, node_id: str) -> List[Node]:
        """
        Nodes one edge away from ``node_id``.

        Each node appears once, in dataset node order.
        """
        neighbors = self.neighbor_ids(node_id)
        return [self._nodes_by_id[n] for n in sorted(neighbors, key=self._node_positions.__getitem__)]
