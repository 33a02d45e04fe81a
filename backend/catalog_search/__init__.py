"""catalog-search package initialization.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Local imports (core first, then alphabetical)
from ._version import __version__
from .catalog import Product, load_catalog
from .core.exceptions import CatalogSearchError
from .embeddings import (
    DocumentRecord,
    IngestionPipeline,
    PydanticAIEmbeddingProvider,
    QueryService,
    VectorStore,
    cosine_similarity,
    top_k,
)

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = (
    "__version__",
    "CatalogSearchError",
    "DocumentRecord",
    "IngestionPipeline",
    "Product",
    "PydanticAIEmbeddingProvider",
    "QueryService",
    "VectorStore",
    "cosine_similarity",
    "load_catalog",
    "top_k",
)
