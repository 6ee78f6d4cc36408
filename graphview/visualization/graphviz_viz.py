"""
Graphviz-based hierarchical node-link renderer.

Nodes are laid out top to bottom by the ``dot`` engine as fixed-size boxes
showing the node label and type. Elements hidden by a hover are emitted
with ``style=invis`` so ``dot`` keeps the same ranks and the diagram does not
jump between hover states.
"""

import base64
from pathlib import Path
from typing import Optional

from ..core.engine import GraphViewEngine
from ..shared.settings import get_settings
from .base import BaseRenderer, RenderScene, SceneEdge, SceneNode

# Lazy import of optional dependencies
try:
    import graphviz
    _PACKAGE_AVAILABLE = True
    _IMPORT_ERROR = None
except ImportError as e:
    graphviz = None
    _PACKAGE_AVAILABLE = False
    _IMPORT_ERROR = str(e)


def _executable_available() -> bool:
    """Whether the Graphviz ``dot`` binary can actually render."""
    if not _PACKAGE_AVAILABLE:
        return False
    try:
        test_dot = graphviz.Digraph()
        test_dot.node('test', 'test')
        test_dot.pipe(format='svg')
        return True
    except (graphviz.ExecutableNotFound, graphviz.CalledProcessError, OSError):
        return False


class GraphvizRenderer(BaseRenderer):
    """Hierarchical node-link diagram renderer using Graphviz.

    DOT source generation only needs the ``graphviz`` Python package; image
    output also needs the Graphviz executables on PATH.
    """

    POINTS_PER_INCH = 72

    # Layout constants, in pixels
    NODE_WIDTH = 180
    NODE_HEIGHT = 60
    NODE_SEP = 80
    RANK_SEP = 100
    DEFAULT_RANKDIR = 'TB'  # Top to Bottom

    VALID_ENGINES = ['dot', 'neato', 'fdp', 'circo', 'twopi', 'sfdp', 'osage']
    VALID_FORMATS = ['png', 'svg', 'pdf']

    # Styling constants
    DEFAULT_BGCOLOR = 'white'
    DEFAULT_FONTNAME = 'Arial'
    NODE_FONT_COLOR = 'white'
    EDGE_FONT_COLOR = '#666666'
    EDGE_FONTSIZE = '12'

    _executable_checked: Optional[bool] = None

    def __init__(self, engine: GraphViewEngine, layout: str = 'dot'):
        """Initialize the Graphviz renderer.

        Args:
            engine: Engine to render
            layout: Graphviz layout engine, 'dot' gives the hierarchical view
        """
        super().__init__(engine)
        self.layout = self._resolve_engine(layout)
        self.image_format = get_settings().image_format

    def is_available(self) -> bool:
        """Check if the package and the ``dot`` executable both work."""
        cls = type(self)
        if cls._executable_checked is None:
            cls._executable_checked = _executable_available()
        return cls._executable_checked

    def is_source_available(self) -> bool:
        """Check if DOT source can be generated (package installed)."""
        return _PACKAGE_AVAILABLE

    # ========== Public Interface ==========

    def generate_dot_source(self, layout: Optional[str] = None) -> str:
        """DOT source of the current scene, or empty string if unavailable."""
        if not self.is_source_available():
            self.logger.error(f"Graphviz package not available: {_IMPORT_ERROR}")
            return ""
        return self.create_graph(self.scene, layout).source

    def generate_image(self, output_path: str = "graph", format: Optional[str] = None,
                       layout: Optional[str] = None, **kwargs) -> str:
        """Render the current scene with Graphviz.

        Args:
            output_path: Base path for output file (extension added automatically)
            format: Output format ('png', 'svg', 'pdf')
            layout: Graphviz layout engine

        Returns:
            Path to generated image file, or empty string if failed
        """
        if not self.is_available():
            self.logger.error(f"Graphviz backend not available: {_IMPORT_ERROR or 'dot executable not found'}")
            return ""

        format = self._resolve_format(format)
        try:
            scene = self.scene
            if scene.is_empty:
                self.logger.warning("No visible nodes to draw")
                return ""

            dot = self.create_graph(scene, layout)
            output_base = Path(output_path)
            if output_base.suffix[1:] in self.VALID_FORMATS:
                output_base = output_base.with_suffix('')
            output_base.parent.mkdir(parents=True, exist_ok=True)
            output_file = dot.render(str(output_base), format=format, cleanup=True)

            self.logger.info(f"Graphviz graph saved to: {output_file}")
            return output_file
        except (graphviz.ExecutableNotFound, graphviz.CalledProcessError, OSError) as e:
            self.logger.error(f"Error generating Graphviz graph: {e}", exc_info=True)
            return ""

    def generate_image_base64(self, format: Optional[str] = None, layout: Optional[str] = None,
                              **kwargs) -> str:
        """Render the current scene as a base64 data URI (PNG or SVG)."""
        if not self.is_available():
            self.logger.error(f"Graphviz backend not available: {_IMPORT_ERROR or 'dot executable not found'}")
            return ""

        format = self._resolve_format(format)
        if format == 'pdf':
            format = 'png'
        try:
            data = self.create_graph(self.scene, layout).pipe(format=format)
            base64_data = base64.b64encode(data).decode('utf-8')
            mime = 'image/svg+xml' if format == 'svg' else 'image/png'
            return f"data:{mime};base64,{base64_data}"
        except (graphviz.ExecutableNotFound, graphviz.CalledProcessError, OSError) as e:
            self.logger.error(f"Error generating Graphviz base64 image: {e}", exc_info=True)
            return ""

    # ========== Graph Construction ==========

    def create_graph(self, scene: RenderScene, layout: Optional[str] = None):
        """Build a Graphviz Digraph for the scene."""
        dot = graphviz.Digraph(comment=scene.title)
        dot.engine = self._resolve_engine(layout or self.layout)
        self._configure_graph_appearance(dot, scene)

        # DOT reads "a:b" in an edge endpoint as node a, port b, so nodes get
        # positional names and keep their own id in the id attribute
        names = {node.id: f"n{index}" for index, node in enumerate(scene.nodes)}
        for node in scene.nodes:
            self._add_node(dot, names[node.id], node)
        for edge in scene.edges:
            self._add_edge(dot, names[edge.source], names[edge.target], edge)

        return dot

    def _configure_graph_appearance(self, dot, scene: RenderScene):
        dot.attr(
            rankdir=self.DEFAULT_RANKDIR,
            nodesep=self._inches(self.NODE_SEP),
            ranksep=self._inches(self.RANK_SEP),
            bgcolor=self.DEFAULT_BGCOLOR,
            label=scene.title,
            labelloc='t',
            fontname=self.DEFAULT_FONTNAME,
        )
        dot.attr('node', shape='box', style='rounded,filled', fixedsize='true',
                 width=self._inches(self.NODE_WIDTH), height=self._inches(self.NODE_HEIGHT),
                 fontname=self.DEFAULT_FONTNAME, fontcolor=self.NODE_FONT_COLOR)
        dot.attr('edge', fontname=self.DEFAULT_FONTNAME, fontsize=self.EDGE_FONTSIZE,
                 fontcolor=self.EDGE_FONT_COLOR)

    def _add_node(self, dot, name: str, node: SceneNode):
        attrs = {
            'id': node.id,
            'fillcolor': node.color,
            'fontsize': str(node.label_size),
            'tooltip': f"{node.label} ({node.type.value})",
        }
        if node.selected:
            attrs.update(color=self.config.SELECTED_OUTLINE_COLOR, penwidth='3')
        else:
            attrs.update(color='#D1D5DB', penwidth='1')
        if node.hidden:
            attrs['style'] = 'invis'

        dot.node(name, f"{node.label}\\n{node.type.value}", **attrs)

    def _add_edge(self, dot, tail: str, head: str, edge: SceneEdge):
        attrs = {
            'label': edge.label,
            'color': edge.color,
            'penwidth': str(edge.width),
            'id': edge.id,
        }
        if edge.hidden:
            attrs['style'] = 'invis'
        dot.edge(tail, head, **attrs)

    # ========== Helpers ==========

    def _inches(self, pixels: int) -> str:
        return f"{pixels / self.POINTS_PER_INCH:.2f}"

    def _resolve_engine(self, layout: str) -> str:
        if layout in self.VALID_ENGINES:
            return layout
        self.logger.warning(f"Unknown layout engine '{layout}', using 'dot'")
        return 'dot'

    def _resolve_format(self, format: Optional[str]) -> str:
        format = (format or self.image_format).lower()
        if format not in self.VALID_FORMATS:
            self.logger.warning(f"Unsupported format '{format}', using 'png'")
            return 'png'
        return format
