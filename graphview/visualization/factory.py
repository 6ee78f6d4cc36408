"""
Renderer factory for backend selection.

Backends are tried in registry order when none is requested, so the
hierarchical Graphviz view is preferred whenever the ``dot`` executable is
installed and the NetworkX canvas is the fallback.
"""

from typing import List, Optional

from ..core.engine import GraphViewEngine
from ..shared.exceptions import BackendUnavailableError, VisualizationError
from ..shared.logger import get_logger
from .base import BaseRenderer
from .graphviz_viz import GraphvizRenderer
from .networkx_viz import NetworkXRenderer

logger = get_logger(__name__)


class RendererFactory:
    """Factory for creating render adapters bound to an engine."""

    # Registry of all supported backends (ordered by preference)
    BACKEND_REGISTRY = {
        'graphviz': GraphvizRenderer,
        'networkx': NetworkXRenderer,
    }

    @staticmethod
    def get_available_backends() -> List[str]:
        """Get list of backends whose dependencies are installed."""
        probe = GraphViewEngine()
        return [
            name for name, backend_class in RendererFactory.BACKEND_REGISTRY.items()
            if backend_class(probe).is_available()
        ]

    @staticmethod
    def create_renderer(engine: GraphViewEngine, backend: Optional[str] = None, **kwargs) -> BaseRenderer:
        """Create a renderer for ``engine``.

        Args:
            engine: Engine the renderer will query
            backend: 'graphviz', 'networkx', or None for automatic selection
            **kwargs: Backend constructor options (e.g. ``layout``)

        Raises:
            VisualizationError: Unknown backend name
            BackendUnavailableError: Backend (or every backend) lacks dependencies
        """
        if backend is None:
            for backend_name, backend_class in RendererFactory.BACKEND_REGISTRY.items():
                renderer = backend_class(engine, **kwargs)
                if renderer.is_available():
                    logger.info(f"Auto-selected visualization backend: {backend_name}")
                    return renderer

            raise BackendUnavailableError("No visualization backends are available. "
                                          "Please install matplotlib+networkx and/or graphviz.")

        try:
            backend_class = RendererFactory.BACKEND_REGISTRY[backend]
        except KeyError:
            raise VisualizationError(f"Unknown backend '{backend}'. "
                                     f"Supported backends: {list(RendererFactory.BACKEND_REGISTRY)}")

        renderer = backend_class(engine, **kwargs)
        if not renderer.is_available():
            raise BackendUnavailableError(f"Backend '{backend}' is not available (missing dependencies). "
                                          f"Available backends: {RendererFactory.get_available_backends()}")
        return renderer

    @staticmethod
    def backend_name(renderer: BaseRenderer) -> Optional[str]:
        """Registry name of a renderer instance."""
        for name, backend_class in RendererFactory.BACKEND_REGISTRY.items():
            if isinstance(renderer, backend_class):
                return name
        return None
