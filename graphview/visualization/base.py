"""
Base classes and shared utilities for the render adapters.

A render adapter holds a GraphViewEngine, subscribes to it, and rebuilds a
backend-neutral RenderScene on every notification. The scene carries the
visual attributes (color, size, hidden) that the core never stores; each
backend (NetworkX, Graphviz) only has to draw it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Set

from ..core.engine import GraphViewEngine
from ..models.graph_models import Edge, Node, NodeType
from ..shared.logger import get_logger


class VisualizationConfig:
    """Shared styling constants for all rendering backends."""

    NODE_COLORS = {
        NodeType.PERSON: '#4CAF50',
        NodeType.COMPANY: '#2196F3',
        NodeType.TECHNOLOGY: '#FF9800',
        NodeType.PROJECT: '#9C27B0',
        NodeType.COMMUNITY: '#F44336',
        NodeType.EVENT: '#795548',
        NodeType.INVESTOR: '#607D8B',
    }
    DEFAULT_COLOR = '#CCCCCC'

    # Node sizes and label sizes per highlight state
    NODE_SIZE = 15
    LABEL_SIZE = 14
    HOVERED_NODE_SIZE = 20
    HOVERED_LABEL_SIZE = 16
    NEIGHBOR_NODE_SIZE = 18
    NEIGHBOR_LABEL_SIZE = 15

    HOVERED_COLOR = '#ff0000'
    NEIGHBOR_COLOR = '#ff9900'
    SELECTED_OUTLINE_COLOR = '#3B82F6'
    LABEL_COLOR = '#000000'

    EDGE_COLOR = '#999'
    EDGE_WIDTH = 1
    HIGHLIGHTED_EDGE_COLOR = '#ff9900'
    HIGHLIGHTED_EDGE_WIDTH = 2

    DEFAULT_TITLE = 'Knowledge Graph'


# Highlight states of a scene node
HIGHLIGHT_NONE = 'none'
HIGHLIGHT_HOVERED = 'hovered'
HIGHLIGHT_NEIGHBOR = 'neighbor'


@dataclass(frozen=True)
class SceneNode:
    """A node as a backend should draw it."""
    id: str
    label: str
    type: NodeType
    color: str
    size: int
    label_size: int
    hidden: bool = False
    highlight: str = HIGHLIGHT_NONE
    selected: bool = False


@dataclass(frozen=True)
class SceneEdge:
    """An edge as a backend should draw it."""
    id: str
    source: str
    target: str
    label: str
    color: str
    width: int
    hidden: bool = False
    highlighted: bool = False


@dataclass
class RenderScene:
    """Drawable snapshot of the engine's visible graph."""
    nodes: List[SceneNode] = field(default_factory=list)
    edges: List[SceneEdge] = field(default_factory=list)
    title: str = VisualizationConfig.DEFAULT_TITLE
    hovered_id: Optional[str] = None
    selected_id: Optional[str] = None

    def shown_nodes(self) -> List[SceneNode]:
        return [n for n in self.nodes if not n.hidden]

    def shown_edges(self) -> List[SceneEdge]:
        return [e for e in self.edges if not e.hidden]

    def node(self, node_id: str) -> Optional[SceneNode]:
        return next((n for n in self.nodes if n.id == node_id), None)

    @property
    def is_empty(self) -> bool:
        return not self.nodes


class PanelMixin:
    """Text renditions of the filter panel and the node details panel."""

    def format_filter_panel(self, engine: GraphViewEngine) -> str:
        """List the types present in the data, checking the active ones."""
        active = engine.active_type_filters
        lines = ["Filter by Type"]
        for node_type in engine.node_types_available():
            mark = 'x' if node_type in active else ' '
            lines.append(f"  [{mark}] {node_type.value}")
        if not active:
            lines.append("  (no filter: all types visible)")
        return "\n".join(lines)

    def describe_relationship(self, engine: GraphViewEngine, edge: Edge, node_id: str) -> str:
        """Render an incident edge from the point of view of ``node_id``."""
        other_id = edge.other_end(node_id)
        other = engine.node_by_id(other_id)
        other_label = other.label if other else other_id
        return f"{edge.relationship} with {other_label}"

    def format_details_panel(self, engine: GraphViewEngine) -> str:
        """Details of the selected node, or a placeholder when none resolves."""
        details = engine.selected_node_details()
        if details is None:
            return "Node Details\n  No node selected"

        node = details.node
        lines = ["Node Details", f"  {node.label} [{node.type.value}]", ""]

        lines.append(f"  Connections ({len(details.connections)}):")
        for other in details.connections:
            lines.append(f"    • {other.label} ({other.type.value})")

        lines.append(f"  Relationships ({len(details.relationships)}):")
        for edge in details.relationships:
            lines.append(f"    • {self.describe_relationship(engine, edge, node.id)}")

        return "\n".join(lines)


class BaseRenderer(ABC, PanelMixin):
    """
    Abstract base class for render adapters.

    Lifecycle: ``mount()`` builds the initial scene and subscribes to the
    engine; every engine notification rebuilds the scene from scratch;
    ``unmount()`` drops the subscription.
    """

    def __init__(self, engine: GraphViewEngine):
        self.engine = engine
        self.config = VisualizationConfig()
        self.logger = get_logger(self.__class__.__module__)
        self._scene: Optional[RenderScene] = None
        self._unsubscribe: Optional[Callable[[], None]] = None
        self._change_callbacks: List[Callable[[RenderScene], None]] = []
        self.rebuild_count = 0

    # ========== Lifecycle ==========

    @property
    def mounted(self) -> bool:
        return self._unsubscribe is not None

    def mount(self) -> RenderScene:
        """Build the initial scene and start following engine changes."""
        if not self.mounted:
            self._unsubscribe = self.engine.subscribe(self._on_state_change)
        return self.rebuild()

    def unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def on_scene_change(self, callback: Callable[[RenderScene], None]) -> None:
        """Register a callback receiving each rebuilt scene (redraw hook)."""
        self._change_callbacks.append(callback)

    def _on_state_change(self) -> None:
        self.rebuild()

    def rebuild(self) -> RenderScene:
        self._scene = self.build_scene()
        self.rebuild_count += 1
        for callback in self._change_callbacks:
            callback(self._scene)
        return self._scene

    @property
    def scene(self) -> RenderScene:
        """Current scene; built on first access when not mounted."""
        if self._scene is None or not self.mounted:
            self._scene = self.build_scene()
        return self._scene

    # ========== Scene Building ==========

    def get_node_color(self, node_type: NodeType) -> str:
        """Get color for a node type, with fallback to default."""
        return self.config.NODE_COLORS.get(node_type, self.config.DEFAULT_COLOR)

    def get_title(self) -> str:
        filters = self.engine.active_type_filters
        if not filters:
            return self.config.DEFAULT_TITLE
        names = ", ".join(t.value for t in self.engine.node_types_available() if t in filters)
        return f"{self.config.DEFAULT_TITLE} (filtered: {names})"

    def build_scene(self) -> RenderScene:
        """
        Map the engine's visible graph to drawable nodes and edges.

        While a visible node is hovered, only that node, its visible
        neighbors and the edges among them are shown; the rest stays in the
        scene marked hidden so layouts keep their positions.
        """
        visible_nodes = self.engine.visible_nodes()
        visible_ids = {node.id for node in visible_nodes}

        hovered = self.engine.hovered_node_id
        hover_active = hovered is not None and hovered in visible_ids
        neighbors = self.engine.hovered_neighbor_ids() if hover_active else set()
        focus = neighbors | {hovered} if hover_active else set()
        selected = self.engine.selected_node_id

        nodes = [self._scene_node(node, hovered, neighbors, hover_active, selected)
                 for node in visible_nodes]

        edges = []
        used_ids: Set[str] = set()
        for edge in self.engine.visible_edges():
            # Parallel edges share a key; later ones get a "#n" suffix
            edge_id, count = edge.id, 1
            while edge_id in used_ids:
                count += 1
                edge_id = f"{edge.id}#{count}"
            used_ids.add(edge_id)

            if not hover_active:
                edges.append(self._scene_edge(edge, edge_id))
            elif edge.source in focus and edge.target in focus:
                edges.append(self._scene_edge(edge, edge_id, highlighted=True))
            else:
                edges.append(self._scene_edge(edge, edge_id, hidden=True))

        return RenderScene(
            nodes=nodes,
            edges=edges,
            title=self.get_title(),
            hovered_id=hovered if hover_active else None,
            selected_id=selected if selected in visible_ids else None,
        )

    def _scene_node(self, node: Node, hovered: Optional[str], neighbors, hover_active: bool,
                    selected: Optional[str]) -> SceneNode:
        cfg = self.config
        is_selected = node.id == selected

        if hover_active and node.id == hovered:
            return SceneNode(node.id, node.label, node.type, cfg.HOVERED_COLOR,
                             cfg.HOVERED_NODE_SIZE, cfg.HOVERED_LABEL_SIZE,
                             highlight=HIGHLIGHT_HOVERED, selected=is_selected)
        if hover_active and node.id in neighbors:
            return SceneNode(node.id, node.label, node.type, cfg.NEIGHBOR_COLOR,
                             cfg.NEIGHBOR_NODE_SIZE, cfg.NEIGHBOR_LABEL_SIZE,
                             highlight=HIGHLIGHT_NEIGHBOR, selected=is_selected)
        return SceneNode(node.id, node.label, node.type, self.get_node_color(node.type),
                         cfg.NODE_SIZE, cfg.LABEL_SIZE, hidden=hover_active, selected=is_selected)

    def _scene_edge(self, edge: Edge, edge_id: str, highlighted: bool = False,
                    hidden: bool = False) -> SceneEdge:
        cfg = self.config
        if highlighted:
            return SceneEdge(edge_id, edge.source, edge.target, edge.relationship,
                             cfg.HIGHLIGHTED_EDGE_COLOR, cfg.HIGHLIGHTED_EDGE_WIDTH,
                             highlighted=True)
        return SceneEdge(edge_id, edge.source, edge.target, edge.relationship,
                         cfg.EDGE_COLOR, cfg.EDGE_WIDTH, hidden=hidden)

    def legend_entries(self, scene: RenderScene) -> Dict[str, str]:
        """Type name -> color for the types drawn in the scene."""
        present = {n.type for n in scene.nodes}
        return {t.value: self.get_node_color(t)
                for t in self.engine.node_types_available() if t in present}

    # ========== Abstract Methods ==========

    @abstractmethod
    def generate_image(self, output_path: str, **kwargs) -> str:
        """Render the current scene to a file.

        Returns:
            Path to generated image file, or empty string if failed
        """
        raise NotImplementedError("Subclasses must implement generate_image()")

    @abstractmethod
    def generate_image_base64(self, **kwargs) -> str:
        """Render the current scene as a base64 data URI.

        Returns:
            Base64-encoded image data, or empty string if failed
        """
        raise NotImplementedError("Subclasses must implement generate_image_base64()")

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the backend dependencies are installed and working."""
        raise NotImplementedError("Subclasses must implement is_available()")
