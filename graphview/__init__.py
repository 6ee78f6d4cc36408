"""
graphview: interactive exploration of typed, labeled graphs.

The core is a view-state engine that derives the visible subgraph from a
node-type filter and resolves selection and hover against it. Render
adapters draw the result with NetworkX or Graphviz.
"""

from .client import GraphExplorer
from .core import GraphStore, GraphViewEngine, ViewState
from .data import load_dataset, sample_graph
from .models import Edge, GraphDataset, Node, NodeDetails, NodeType

__version__ = "1.0.0"
__all__ = [
    "GraphExplorer",
    "GraphStore",
    "GraphViewEngine",
    "ViewState",
    "load_dataset",
    "sample_graph",
    "Edge",
    "GraphDataset",
    "Node",
    "NodeDetails",
    "NodeType",
]
