"""
Centralized configuration management for graphview.

All environment variables and settings are managed here so the CLI, the
client facade and the renderers agree on defaults.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

from .exceptions import ConfigurationError


class Settings(BaseSettings):
    """
    Centralized settings for graphview.

    Loaded from ``GRAPH_VIEW_*`` environment variables (or a ``.env`` file)
    with sensible defaults.
    """

    # === Application Settings ===
    app_name: str = Field(default="graphview", description="Application name")
    log_level: str = Field(default="INFO", description="Logging level")
    log_file: Optional[str] = Field(default=None, description="Optional log file path")

    # === Dataset Settings ===
    dataset_path: Optional[Path] = Field(default=None, description="JSON dataset used when none is given")

    # === Rendering Settings ===
    default_backend: Optional[str] = Field(default=None, description="Preferred backend ('graphviz', 'networkx')")
    default_layout: str = Field(default="circular", description="Default canvas layout")
    image_format: str = Field(default="png", description="Default image format")
    output_dir: Path = Field(default=Path("output"), description="Directory for rendered files")
    layout_seed: int = Field(default=42, description="Seed for randomized layouts")

    # === Interactive HTML Settings ===
    html_height: str = Field(default="750px", description="Height of the HTML canvas")
    html_width: str = Field(default="100%", description="Width of the HTML canvas")

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()

    @field_validator('default_backend')
    @classmethod
    def validate_default_backend(cls, v):
        if v is None or not v.strip():
            return None
        v = v.strip().lower()
        if v not in {'graphviz', 'networkx'}:
            raise ValueError("Default backend must be 'graphviz' or 'networkx'")
        return v

    model_config = {
        "env_prefix": "GRAPH_VIEW_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @property
    def logging_config(self) -> dict:
        """Get logging configuration."""
        return {
            'level': self.log_level,
            'file': self.log_file,
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        }


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once per process; call ``get_settings.cache_clear()``
    after changing the environment.

    Raises:
        ConfigurationError: If an environment value fails validation
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid graphview settings: {e}") from e
