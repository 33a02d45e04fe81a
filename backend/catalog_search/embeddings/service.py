"""Query façade over the vector store.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
from typing import TYPE_CHECKING

# Local imports (core first, then alphabetical)
from catalog_search.core.constants import DEFAULT_TOP_K
from catalog_search.infra.instrumentation import get_logger, traced

from .similarity import top_k

if TYPE_CHECKING:
    from catalog_search.core.protocols import EmbeddingProvider
    from catalog_search.core.types import SearchResult

    from .store import DocumentRecord, VectorStore

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("QueryService",)

logger = get_logger("embeddings.service")


# =============================================================================
# Section 11: Classes
# =============================================================================
class QueryService:
    """Embeds query text and ranks stored documents against it."""

    def __init__(self, store: VectorStore, provider: EmbeddingProvider) -> None:
        self.store = store
        self.provider = provider

    async def search_with_scores(self, query_text: str, k: int = DEFAULT_TOP_K) -> list[tuple[DocumentRecord, float]]:
        """Return ``(record, score)`` pairs for the ``k`` best matches.

        Provider errors propagate to the caller unchanged.
        """
        query = await self.provider.embed_query(query_text)
        return top_k(self.store, query, k)

    async def similarity_search(self, query_text: str, k: int = DEFAULT_TOP_K) -> list[DocumentRecord]:
        """Return only the matching records, best first."""
        return [record for record, _score in await self.search_with_scores(query_text, k)]

    @traced("search")
    async def search(self, query_text: str, k: int = DEFAULT_TOP_K) -> list[SearchResult]:
        """Search and flatten each hit into metadata plus ``content`` and ``score``.

        Args:
            query_text: Free-text query.
            k: Maximum number of results.

        Returns:
            Result dicts ordered by descending score; empty when the store is.
        """
        hits = await self.search_with_scores(query_text, k)
        logger.debug("Search returned {count} results", count=len(hits), k=k)
        return [{**record.metadata, "content": record.content, "score": score} for record, score in hits]
