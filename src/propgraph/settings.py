from __future__ import annotations

from pydantic import Field

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except Exception as e:  # pragma: no cover
    raise RuntimeError(
        "pydantic-settings is required. Install with: pip install pydantic-settings"
    ) from e


class PropgraphSettings(BaseSettings):
    """Configuration for propgraph.

    Environment variables are prefixed with PROPGRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="PROPGRAPH_", extra="ignore")

    # --- Logging ---
    log_level: str = Field(default="INFO", description="Python logging level")
    log_format: str = Field(default="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # --- Display ---
    uppercase_edge_labels: bool = Field(default=True, description="Render edge labels in upper case")


settings = PropgraphSettings()
