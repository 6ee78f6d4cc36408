"""
Query surface consumed by the render adapters.

The engine composes one GraphStore and one ViewState and derives everything
on demand from their current contents:

    engine = GraphViewEngine(sample_graph())
    unsubscribe = engine.subscribe(redraw)

    engine.toggle_type_filter(NodeType.PERSON)
    engine.visible_nodes()          # only people
    engine.set_selected_node("1")
    engine.selected_node_details()  # restricted to visible nodes and edges

Selection details and hover neighbors are always intersected with the
visible set, so a panel or highlight never shows a node the canvas hides.
"""

from typing import Callable, FrozenSet, List, Optional, Set

from ..models.graph_models import Edge, GraphDataset, Node, NodeDetails, NodeType
from ..shared.logger import get_logger
from .store import GraphStore
from .view_state import Listener, ViewState


class GraphViewEngine:
    """
    View-state engine for one visualization session.

    Renderers hold a reference to the engine only. All state changes go
    through the four mutators below; touching the underlying ViewState
    directly, or sharing one engine between two live renderers, is a contract
    violation that is not checked.
    """

    def __init__(self, dataset: Optional[GraphDataset] = None, store: Optional[GraphStore] = None):
        """
        Create an engine over a dataset or over an existing (shared) store.

        Args:
            dataset: Graph to build a private store from
            store: Already built store, shared read-only across engines
        """
        if store is None:
            store = GraphStore(dataset if dataset is not None else GraphDataset())
        self._store = store
        self._state = ViewState()
        self.logger = get_logger(__name__)
        self.logger.debug(
            f"Engine created over {len(store.all_nodes())} nodes and {len(store.all_edges())} edges"
        )

    @property
    def store(self) -> GraphStore:
        return self._store

    # ========== Visibility ==========

    def visible_nodes(self) -> List[Node]:
        """Nodes passing the type filter, in dataset order."""
        filters = self._state.active_type_filters
        if not filters:
            return self._store.all_nodes()
        return [node for node in self._store.all_nodes() if node.type in filters]

    def visible_node_ids(self) -> Set[str]:
        return {node.id for node in self.visible_nodes()}

    def visible_edges(self) -> List[Edge]:
        """Edges whose two endpoints are both visible."""
        return self._edges_within(self.visible_node_ids())

    def _edges_within(self, node_ids: Set[str]) -> List[Edge]:
        return [
            edge for edge in self._store.all_edges()
            if edge.source in node_ids and edge.target in node_ids
        ]

    # ========== Selection & Hover ==========

    def selected_node_details(self) -> Optional[NodeDetails]:
        """
        Details of the selected node, or None when nothing resolves.

        Connections and relationships are limited to the visible set; the
        selected node itself may be filtered out and still be described.
        """
        node = self._store.node_by_id(self._state.selected_node_id)
        if node is None:
            return None

        visible_ids = self.visible_node_ids()
        connections = [n for n in self._store.connected_nodes(node.id) if n.id in visible_ids]
        relationships = [
            edge for edge in self._store.relationships_of(node.id)
            if edge.source in visible_ids and edge.target in visible_ids
        ]
        return NodeDetails(node=node, connections=connections, relationships=relationships)

    def hovered_neighbor_ids(self) -> Set[str]:
        """Visible neighbors of the hovered node; empty when nothing is hovered."""
        hovered = self._state.hovered_node_id
        if hovered is None:
            return set()
        return self._store.neighbor_ids(hovered) & self.visible_node_ids()

    # ========== Mutators ==========

    def toggle_type_filter(self, node_type: NodeType) -> None:
        self._state.toggle_type_filter(node_type)

    def clear_filters(self) -> None:
        self._state.clear_filters()

    def set_selected_node(self, node_id: Optional[str]) -> None:
        self._state.set_selected(node_id)

    def set_hovered_node(self, node_id: Optional[str]) -> None:
        self._state.set_hovered(node_id)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a callback run synchronously after every mutator."""
        return self._state.subscribe(listener)

    # ========== Read Access ==========

    @property
    def active_type_filters(self) -> FrozenSet[NodeType]:
        return self._state.active_type_filters

    @property
    def selected_node_id(self) -> Optional[str]:
        return self._state.selected_node_id

    @property
    def hovered_node_id(self) -> Optional[str]:
        return self._state.hovered_node_id

    def node_types_available(self) -> List[NodeType]:
        """Types that occur in the data, first-seen order."""
        return self._store.unique_types_present()

    def node_by_id(self, node_id: Optional[str]) -> Optional[Node]:
        return self._store.node_by_id(node_id)

    def nodes_by_type(self, node_type: NodeType) -> List[Node]:
        return self._store.nodes_by_type(node_type)
