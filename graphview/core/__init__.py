"""
Graph view-state engine: canonical store, session state and query surface.
"""

from .store import GraphStore
from .view_state import ViewState
from .engine import GraphViewEngine

__all__ = ['GraphStore', 'ViewState', 'GraphViewEngine']
