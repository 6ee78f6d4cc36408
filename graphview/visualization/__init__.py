"""
Render adapters for graphview.

Two backends consume the engine's query surface:

- ``NetworkXRenderer``: circular / force-directed canvas (Matplotlib, pyvis HTML)
- ``GraphvizRenderer``: hierarchical node-link diagram (``dot``)

Usage:
    from graphview.visualization import RendererFactory

    renderer = RendererFactory.create_renderer(engine, backend='networkx')
    renderer.mount()
    renderer.generate_image('graph.png')
"""

from .base import (
    BaseRenderer,
    PanelMixin,
    RenderScene,
    SceneEdge,
    SceneNode,
    VisualizationConfig,
)
from .factory import RendererFactory
from .graphviz_viz import GraphvizRenderer
from .networkx_viz import NetworkXRenderer

__all__ = [
    'BaseRenderer',
    'PanelMixin',
    'RenderScene',
    'SceneEdge',
    'SceneNode',
    'VisualizationConfig',
    'RendererFactory',
    'GraphvizRenderer',
    'NetworkXRenderer',
]
