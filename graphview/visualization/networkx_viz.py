"""
NetworkX-based canvas renderer using Matplotlib.

Circular, force-directed (spring), shell and random layouts are computed by
NetworkX over every visible node, including nodes hidden by a hover, so the
picture does not reshuffle while the user hovers around. The interactive
HTML export goes through pyvis.
"""

import base64
import io
from pathlib import Path
from typing import Dict, Optional, Tuple

from ..core.engine import GraphViewEngine
from ..shared.settings import get_settings
from .base import BaseRenderer, RenderScene

# Lazy import of optional dependencies
try:
    import networkx as nx
    import matplotlib.pyplot as plt
    import matplotlib.patches as mpatches
    _DEPENDENCIES_AVAILABLE = True
    _IMPORT_ERROR = None
except ImportError as e:
    nx = None
    plt = None
    mpatches = None
    _DEPENDENCIES_AVAILABLE = False
    _IMPORT_ERROR = str(e)

try:
    from pyvis.network import Network
    _PYVIS_AVAILABLE = True
except ImportError:
    Network = None
    _PYVIS_AVAILABLE = False


class NetworkXRenderer(BaseRenderer):
    """Force/circular layout canvas renderer.

    Draws the engine's scene with NetworkX layouts and Matplotlib, and can
    export an interactive vis.js page with pyvis.
    """

    LAYOUTS = ('circular', 'force', 'shell', 'random')
    LAYOUT_ALIASES = {'spring': 'force'}

    # Configuration constants
    DEFAULT_FIGURE_SIZE = (12, 8)
    DEFAULT_DPI = 100
    HIGH_DPI = 300  # For saved images
    NODE_AREA_SCALE = 3  # scene size -> matplotlib marker area
    EDGE_FONT_SIZE = 7
    TITLE_FONT_SIZE = 16
    LAYOUT_SPRING_K = 2
    FORCE_ITERATIONS = 100
    HTML_POSITION_SCALE = 500

    def __init__(self, engine: GraphViewEngine, layout: Optional[str] = None):
        """Initialize the NetworkX renderer.

        Args:
            engine: Engine to render
            layout: Default layout, falls back to the configured one
        """
        super().__init__(engine)
        settings = get_settings()
        self.layout = self._resolve_layout(layout or settings.default_layout)
        self.seed = settings.layout_seed

    def is_available(self) -> bool:
        """Check if NetworkX and Matplotlib are importable."""
        return _DEPENDENCIES_AVAILABLE

    def is_html_available(self) -> bool:
        return _DEPENDENCIES_AVAILABLE and _PYVIS_AVAILABLE

    # ========== Public Interface ==========

    def generate_image(self, output_path: str = "graph.png", layout: Optional[str] = None,
                       show_edge_labels: bool = True, **kwargs) -> str:
        """Render the current scene to an image file.

        Args:
            output_path: Path for output image file (format from extension)
            layout: Layout algorithm ('circular', 'force', 'shell', 'random')
            show_edge_labels: Whether to draw relationship labels

        Returns:
            Path to generated image file, or empty string if failed
        """
        if not self.is_available():
            self.logger.error(f"NetworkX backend not available: {_IMPORT_ERROR}")
            return ""

        fig = None
        try:
            fig = self._draw(layout, show_edge_labels)
            if fig is None:
                return ""
            Path(output_path).parent.mkdir(parents=True, exist_ok=True)
            fig.savefig(output_path, dpi=self.HIGH_DPI, bbox_inches='tight',
                        facecolor='white', edgecolor='none')
            self.logger.info(f"NetworkX graph image saved to: {output_path}")
            return str(output_path)
        except Exception as e:
            self.logger.error(f"Error creating NetworkX visualization: {e}", exc_info=True)
            return ""
        finally:
            if fig is not None:
                plt.close(fig)

    def generate_image_base64(self, layout: Optional[str] = None, show_edge_labels: bool = True,
                              **kwargs) -> str:
        """Render the current scene as a base64 PNG data URI.

        Returns:
            Base64-encoded PNG image data, or empty string if failed
        """
        if not self.is_available():
            self.logger.error(f"NetworkX backend not available: {_IMPORT_ERROR}")
            return ""

        fig = None
        try:
            fig = self._draw(layout, show_edge_labels)
            if fig is None:
                return ""
            img_buffer = io.BytesIO()
            fig.savefig(img_buffer, format='png', dpi=self.DEFAULT_DPI, bbox_inches='tight')
            base64_data = base64.b64encode(img_buffer.getvalue()).decode('utf-8')
            img_buffer.close()
            return f"data:image/png;base64,{base64_data}"  # Matplotlib, so PNG only
        except Exception as e:
            self.logger.error(f"Error generating NetworkX base64 image: {e}", exc_info=True)
            return ""
        finally:
            if fig is not None:
                plt.close(fig)

    def show_interactive(self, layout: Optional[str] = None, show_edge_labels: bool = True):
        """Display the current scene inline (for Jupyter notebooks)."""
        if not self.is_available():
            self.logger.error(f"NetworkX backend not available: {_IMPORT_ERROR}")
            return
        fig = self._draw(layout, show_edge_labels)
        if fig is not None:
            plt.show()

    def generate_html(self, output_path: str = "graph.html", layout: Optional[str] = None) -> str:
        """Export the current scene as an interactive vis.js page via pyvis.

        The 'force' layout keeps physics enabled in the browser; other
        layouts pin nodes at the NetworkX positions.

        Returns:
            Path to the HTML file, or empty string if failed
        """
        if not self.is_html_available():
            self.logger.error("HTML export requires networkx and pyvis")
            return ""

        try:
            layout = self._resolve_layout(layout or self.layout)
            scene = self.scene
            positions = self.compute_positions(scene, layout)
            settings = get_settings()

            net = Network(height=settings.html_height, width=settings.html_width,
                          directed=True, notebook=False, cdn_resources='remote')
            physics = layout == 'force'

            for node in scene.nodes:
                x, y = positions.get(node.id, (0.0, 0.0))
                net.add_node(
                    node.id,
                    label=node.label,
                    title=f"{node.label} ({node.type.value})",
                    color=node.color,
                    size=node.size,
                    hidden=node.hidden,
                    borderWidth=3 if node.selected else 1,
                    x=float(x) * self.HTML_POSITION_SCALE,
                    y=float(-y) * self.HTML_POSITION_SCALE,
                    physics=physics,
                )

            for edge in scene.edges:
                net.add_edge(edge.source, edge.target, title=edge.label, label=edge.label,
                             color=edge.color, width=edge.width, hidden=edge.hidden)

            if not physics:
                net.toggle_physics(False)

            Path(output_path).parent.mkdir(parents=True, exist_ok=True)
            net.write_html(str(output_path))
            self.logger.info(f"Interactive graph saved to: {output_path}")
            return str(output_path)
        except Exception as e:
            self.logger.error(f"Error generating HTML graph: {e}", exc_info=True)
            return ""

    # ========== Layout ==========

    def _resolve_layout(self, layout: str) -> str:
        layout = self.LAYOUT_ALIASES.get(layout, layout)
        if layout not in self.LAYOUTS:
            self.logger.warning(f"Unknown layout '{layout}', using 'circular'")
            return 'circular'
        return layout

    def _build_graph(self, scene: RenderScene):
        """NetworkX graph over every scene node, hidden ones included."""
        G = nx.Graph()
        for node in scene.nodes:
            G.add_node(node.id)
        for edge in scene.edges:
            G.add_edge(edge.source, edge.target)
        return G

    def compute_positions(self, scene: RenderScene, layout: Optional[str] = None) -> Dict[str, Tuple[float, float]]:
        """Node id -> (x, y) for the requested layout."""
        G = self._build_graph(scene)
        if len(G) == 0:
            return {}

        layout = self._resolve_layout(layout or self.layout)
        layout_map = {
            'force': lambda g: nx.spring_layout(g, k=self.LAYOUT_SPRING_K / max(len(g), 1) ** 0.5,
                                                iterations=self.FORCE_ITERATIONS, seed=self.seed),
            'circular': nx.circular_layout,
            'shell': nx.shell_layout,
            'random': lambda g: nx.random_layout(g, seed=self.seed),
        }
        positions = layout_map[layout](G)
        return {node_id: (float(x), float(y)) for node_id, (x, y) in positions.items()}

    # ========== Drawing ==========

    def _draw(self, layout: Optional[str], show_edge_labels: bool):
        """Draw the current scene on a new figure; None when there is nothing to draw."""
        scene = self.scene
        if scene.is_empty:
            self.logger.warning("No visible nodes to draw")
            return None

        G = self._build_graph(scene)
        pos = self.compute_positions(scene, layout)

        fig, ax = plt.subplots(figsize=self.DEFAULT_FIGURE_SIZE)
        ax.set_title(scene.title, fontsize=self.TITLE_FONT_SIZE, fontweight='bold')

        shown_nodes = scene.shown_nodes()
        shown_edges = scene.shown_edges()

        if shown_edges:
            nx.draw_networkx_edges(
                G, pos, ax=ax,
                edgelist=[(e.source, e.target) for e in shown_edges],
                edge_color=[e.color for e in shown_edges],
                width=[e.width for e in shown_edges],
                alpha=0.8,
            )

        nx.draw_networkx_nodes(
            G, pos, ax=ax,
            nodelist=[n.id for n in shown_nodes],
            node_color=[n.color for n in shown_nodes],
            node_size=[n.size ** 2 * self.NODE_AREA_SCALE for n in shown_nodes],
            edgecolors=[self.config.SELECTED_OUTLINE_COLOR if n.selected else 'white' for n in shown_nodes],
            linewidths=[3 if n.selected else 1 for n in shown_nodes],
        )

        # Labels grouped by size, matplotlib takes one font size per call
        for label_size in sorted({n.label_size for n in shown_nodes}):
            labels = {n.id: n.label for n in shown_nodes if n.label_size == label_size}
            nx.draw_networkx_labels(G, pos, labels, ax=ax, font_size=label_size * 0.6,
                                    font_weight='bold', font_color=self.config.LABEL_COLOR)

        if show_edge_labels and shown_edges:
            edge_labels = {(e.source, e.target): e.label for e in shown_edges if e.source != e.target}
            nx.draw_networkx_edge_labels(G, pos, edge_labels, ax=ax, font_size=self.EDGE_FONT_SIZE,
                                         bbox=dict(boxstyle="round,pad=0.2", facecolor="white", alpha=0.7))

        legend = [mpatches.Patch(color=color, label=name)
                  for name, color in self.legend_entries(scene).items()]
        if legend:
            ax.legend(handles=legend, loc='upper right')

        ax.axis('off')
        fig.tight_layout()
        return fig
