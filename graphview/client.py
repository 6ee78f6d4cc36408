"""
GraphExplorer client interface.

Usage:
    from graphview import GraphExplorer

    explorer = GraphExplorer()                 # bundled sample graph
    explorer.engine.toggle_type_filter("Person")
    explorer.engine.set_selected_node("1")
    print(explorer.details_panel())
    explorer.render("output/people.png")
"""

from pathlib import Path
from typing import Optional

from .core.engine import GraphViewEngine
from .data.loader import load_dataset
from .data.sample import sample_graph
from .models.graph_models import GraphDataset
from .shared.exceptions import VisualizationError
from .shared.logger import get_logger
from .shared.settings import get_settings
from .visualization.base import BaseRenderer, PanelMixin
from .visualization.factory import RendererFactory
from .visualization.networkx_viz import NetworkXRenderer


class GraphExplorer(PanelMixin):
    """
    One visualization session: an engine plus a lazily created renderer.

    The renderer is mounted on first use and follows every engine change.
    Two explorers never share an engine; build a second explorer (possibly
    over the same store) for a second, simultaneous view.
    """

    def __init__(self,
                 dataset: Optional[GraphDataset] = None,
                 backend: Optional[str] = None,
                 layout: Optional[str] = None):
        """
        Args:
            dataset: Graph to explore (defaults to the configured dataset
                file, then to the bundled sample graph)
            backend: 'graphviz', 'networkx', or None for automatic selection
            layout: Backend-specific layout name
        """
        self.settings = get_settings()
        self.logger = get_logger(__name__)

        if dataset is None:
            if self.settings.dataset_path:
                dataset = load_dataset(self.settings.dataset_path)
            else:
                dataset = sample_graph()

        self.engine = GraphViewEngine(dataset)
        self.backend = backend or self.settings.default_backend
        self.layout = layout

        # Lazy loading, backends probe external executables
        self._renderer: Optional[BaseRenderer] = None

    @property
    def renderer(self) -> BaseRenderer:
        if self._renderer is None:
            self._renderer = self._create_renderer(self.backend)
        return self._renderer

    def _create_renderer(self, backend: Optional[str]) -> BaseRenderer:
        kwargs = {'layout': self.layout} if self.layout else {}
        renderer = RendererFactory.create_renderer(self.engine, backend, **kwargs)
        renderer.mount()
        return renderer

    def switch_backend(self, backend: str) -> BaseRenderer:
        """Replace the current renderer by one of another backend."""
        renderer = self._create_renderer(backend)
        self.close()
        self._renderer = renderer
        self.backend = backend
        self.logger.info(f"Switched to {backend} backend")
        return renderer

    # ========== Panels ==========

    def filter_panel(self) -> str:
        return self.format_filter_panel(self.engine)

    def details_panel(self) -> str:
        return self.format_details_panel(self.engine)

    # ========== Output ==========

    def render(self, output_path: Optional[str] = None, format: Optional[str] = None,
               html: bool = False) -> str:
        """
        Write the current view to disk.

        Args:
            output_path: Target file; defaults to ``<output_dir>/graph.<format>``
            format: Image format ('png', 'svg', 'pdf'); ignored for HTML
            html: Export an interactive page instead of a static image

        Returns:
            Path of the written file

        Raises:
            VisualizationError: If the backend produced nothing
        """
        format = (format or self.settings.image_format).lower()
        suffix = 'html' if html else format
        if output_path is None:
            output_path = str(Path(self.settings.output_dir) / f"graph.{suffix}")

        if html:
            renderer = self.renderer
            if not isinstance(renderer, NetworkXRenderer):
                renderer = NetworkXRenderer(self.engine, layout=self.layout)
            result = renderer.generate_html(output_path)
        elif isinstance(self.renderer, NetworkXRenderer):
            result = self.renderer.generate_image(str(Path(output_path).with_suffix(f".{format}")))
        else:
            result = self.renderer.generate_image(output_path, format=format)

        if not result:
            raise VisualizationError(f"Rendering to {output_path} failed")
        return result

    def close(self) -> None:
        """Stop the renderer from following engine changes."""
        if self._renderer is not None:
            self._renderer.unmount()
            self._renderer = None
