"""
Common exceptions for graphview.

The view-state engine itself never raises: lookups on unknown ids resolve to
``None`` or empty results. These exceptions cover the layers around it
(dataset loading, configuration, rendering backends).
"""


class GraphViewError(Exception):
    """Base exception for all graphview errors."""
    pass


class ConfigurationError(GraphViewError):
    """Raised when there are configuration issues."""
    pass


class DatasetError(GraphViewError):
    """Raised when a graph dataset cannot be read or fails validation."""
    pass


class VisualizationError(GraphViewError):
    """Raised when a rendering backend cannot be created or used."""
    pass


class BackendUnavailableError(VisualizationError):
    """Raised when a requested backend is missing its dependencies."""
    pass
