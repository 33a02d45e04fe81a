"""Vector store, similarity search and embedding utilities.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# Local imports (core first, then alphabetical)
from .embedder import DEFAULT_MODEL, PydanticAIEmbeddingProvider, get_embedder
from .ingest import IngestionPipeline
from .service import QueryService
from .similarity import cosine_similarity, top_k
from .store import DocumentRecord, VectorStore

__all__ = (
    "DEFAULT_MODEL",
    "PydanticAIEmbeddingProvider",
    "get_embedder",
    "IngestionPipeline",
    "QueryService",
    "cosine_similarity",
    "top_k",
    "DocumentRecord",
    "VectorStore",
)
