"""
Configuration for tagmap.

Defaults cover a stock Shopify export. A ``tagmap.yaml`` in the working
directory (or any file passed with ``--config``) can override them:

    tag_delimiter: ";"
    page_title: "London Tea - Product Tags"
    batch_size: 250
"""

import logging
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .core.errors import ConfigError
from .core.identity import DEFAULT_DELIMITER

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "tagmap.yaml"
DEFAULT_INPUT = "products.csv"
DEFAULT_OUTPUT = "graph.html"
VIS_NETWORK_URL = "https://unpkg.com/vis-network@9.1.9/standalone/umd/vis-network.min.js"


class TagmapConfig(BaseModel):
    """Settings for graph building and page rendering."""

    tag_delimiter: str = DEFAULT_DELIMITER
    page_title: str = "Shopify Product–Tag Graph"
    heading: str = "Product–Tag Mindmap"
    batch_size: int = Field(400, ge=1)
    product_shape: str = Field("dot", min_length=1)
    tag_shape: str = Field("diamond", min_length=1)
    vis_network_url: str = Field(VIS_NETWORK_URL, min_length=1)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("tag_delimiter")
    @classmethod
    def _delimiter_not_empty(cls, value: str) -> str:
        if value == "":
            raise ValueError("tag_delimiter must not be empty")
        return value

    def with_overrides(self, **overrides: Any) -> "TagmapConfig":
        """Return a validated copy with the non-None overrides applied."""
        updates = {k: v for k, v in overrides.items() if v is not None}
        if not updates:
            return self
        try:
            return TagmapConfig.model_validate({**self.model_dump(), **updates})
        except ValidationError as e:
            raise ConfigError(f"Invalid option: {e}") from e


def load_config(path: Optional[Union[str, Path]] = None) -> TagmapConfig:
    """
    Load configuration from YAML.

    Args:
        path: Explicit config file. When None, ``tagmap.yaml`` in the current
            directory is used if it exists, otherwise defaults apply.

    Raises:
        ConfigError: The file is unreadable, not a mapping, or fails validation.
    """
    if path is None:
        candidate = Path.cwd() / DEFAULT_CONFIG_FILE
        if not candidate.exists():
            return TagmapConfig()
        path = candidate

    config_path = Path(path)
    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config {config_path} must be a mapping, got {type(raw).__name__}")

    try:
        config = TagmapConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {config_path}: {e}") from e

    logger.debug(f"Loaded config from {config_path}")
    return config
