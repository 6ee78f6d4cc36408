"""
Mutable session state for one visualization: type filter, selection, hover.

Every mutator notifies subscribers synchronously, in subscription order,
after the change is applied. There is no batching and no deduplication, so a
repeated ``set_selected`` with the same id still notifies.

Listeners must not mutate the same ViewState while being notified. This is
not guarded.
"""

from typing import Callable, FrozenSet, List, Optional, Set, Tuple

from ..models.graph_models import NodeType

Listener = Callable[[], None]


class ViewState:
    """Active type filters, selected node id and hovered node id."""

    def __init__(self):
        self._active_type_filters: Set[NodeType] = set()
        self._selected_node_id: Optional[str] = None
        self._hovered_node_id: Optional[str] = None
        self._listeners: List[Tuple[object, Listener]] = []

    # ========== Read Access ==========

    @property
    def active_type_filters(self) -> FrozenSet[NodeType]:
        """Current filter. Empty means every type is visible."""
        return frozenset(self._active_type_filters)

    @property
    def selected_node_id(self) -> Optional[str]:
        return self._selected_node_id

    @property
    def hovered_node_id(self) -> Optional[str]:
        return self._hovered_node_id

    # ========== Mutators ==========

    def toggle_type_filter(self, node_type: NodeType) -> None:
        """Add the type if absent, remove it if present."""
        node_type = NodeType(node_type)
        if node_type in self._active_type_filters:
            self._active_type_filters.discard(node_type)
        else:
            self._active_type_filters.add(node_type)
        self._notify()

    def clear_filters(self) -> None:
        """Reset to the empty filter (show all)."""
        self._active_type_filters.clear()
        self._notify()

    def set_selected(self, node_id: Optional[str]) -> None:
        self._selected_node_id = node_id
        self._notify()

    def set_hovered(self, node_id: Optional[str]) -> None:
        self._hovered_node_id = node_id
        self._notify()

    # ========== Notification ==========

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a zero-argument callback run after every mutation.

        Returns:
            Function removing exactly this registration. Calling it more
            than once is a no-op.
        """
        token = object()
        self._listeners.append((token, listener))

        def unsubscribe() -> None:
            self._listeners = [(t, cb) for t, cb in self._listeners if t is not token]

        return unsubscribe

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def _notify(self) -> None:
        for _, listener in list(self._listeners):
            listener()
