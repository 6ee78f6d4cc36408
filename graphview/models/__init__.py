"""
Shared data models for graphview.

Contains canonical definitions for graph entities used across the core
engine, the dataset loaders and the render adapters.
"""

from .graph_models import NodeType, Node, Edge, GraphDataset, NodeDetails

__all__ = ['NodeType', 'Node', 'Edge', 'GraphDataset', 'NodeDetails']
