"""
Shared infrastructure for graphview: settings, logging and exceptions.
"""

from .exceptions import (
    GraphViewError,
    ConfigurationError,
    DatasetError,
    VisualizationError,
    BackendUnavailableError,
)
from .logger import get_logger, setup_logging
from .settings import Settings, get_settings

__all__ = [
    'GraphViewError',
    'ConfigurationError',
    'DatasetError',
    'VisualizationError',
    'BackendUnavailableError',
    'get_logger',
    'setup_logging',
    'Settings',
    'get_settings',
]
