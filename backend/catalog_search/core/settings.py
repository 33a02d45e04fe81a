"""Runtime settings for catalog-search.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
from pathlib import Path
from typing import Literal

# Third-party (alphabetical)
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Local imports (core first, then alphabetical)
from .constants import DEFAULT_CATALOG_PATH, DEFAULT_EMBEDDING_MODEL, DEFAULT_TOP_K

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("CatalogSearchSettings", "load_settings")


# =============================================================================
# Section 11: Classes
# =============================================================================
class CatalogSearchSettings(BaseSettings):
    """Settings shared by the CLI and the service wiring."""

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_SEARCH_",
        env_file=".env",
        extra="ignore",
        validate_default=True,
    )

    catalog_path: Path = Field(
        default=Path(DEFAULT_CATALOG_PATH),
        description="JSON file holding the product catalog",
    )
    embedding_model: str = Field(
        default=DEFAULT_EMBEDDING_MODEL,
        description="pydantic-ai embedding model identifier",
    )
    default_k: int = Field(
        default=DEFAULT_TOP_K,
        ge=1,
        description="Number of results returned per query",
    )
    environment: str = Field(
        default="development",
        description="Deployment environment reported to logfire",
    )
    send_to_logfire: bool | Literal["if-token-present"] = Field(
        default="if-token-present",
        description="Whether telemetry is exported to Logfire",
    )


# =============================================================================
# Section 12: Functions
# =============================================================================
def load_settings(**overrides: object) -> CatalogSearchSettings:
    """Load settings from environment, applying explicit overrides.

    ``None`` overrides are ignored so unset CLI flags fall back to the
    environment.
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    return CatalogSearchSettings(**values)
