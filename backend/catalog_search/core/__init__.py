"""Core types, settings and errors for catalog-search.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# Local imports (core first, then alphabetical)
from .exceptions import (
    CatalogLoadError,
    CatalogSearchError,
    DimensionMismatchError,
    DocumentNotFoundError,
    ProviderContractViolationError,
    ProviderError,
    ProviderFailureError,
)
from .protocols import EmbeddingProvider
from .settings import CatalogSearchSettings, load_settings

__all__ = (
    "CatalogLoadError",
    "CatalogSearchError",
    "DimensionMismatchError",
    "DocumentNotFoundError",
    "ProviderContractViolationError",
    "ProviderError",
    "ProviderFailureError",
    "EmbeddingProvider",
    "CatalogSearchSettings",
    "load_settings",
)
