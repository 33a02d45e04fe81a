"""Batch ingestion of documents into a vector store.

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
from catalog_search.catalog.loader import products_to_items
from catalog_search.core.exceptions import ProviderContractViolationError
from catalog_search.infra.instrumentation import get_logger, traced

from .store import DocumentRecord

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from catalog_search.catalog.models import Product
    from catalog_search.core.protocols import EmbeddingProvider
    from catalog_search.core.types import DocumentId, IngestItem

    from .store import VectorStore

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("IngestionPipeline",)

logger = get_logger("embeddings.ingest")


# =============================================================================
# Section 11: Classes
# =============================================================================
class IngestionPipeline:
    """Embeds batches of texts and appends them to a store."""

    def __init__(self, store: VectorStore, provider: EmbeddingProvider) -> None:
        self.store = store
        self.provider = provider

    @traced("ingest", record_args=False)
    async def ingest(self, items: Sequence[IngestItem]) -> list[DocumentId]:
        """Embed ``items`` with one provider call and append them.

        Nothing is appended unless the provider returns exactly one vector
        per text.

        Args:
            items: ``(text, metadata)`` pairs, stored in this order.

        Returns:
            Identifiers assigned to the new documents.

        Raises:
            ProviderContractViolationError: If the vector count differs from
                the number of texts.
            DimensionMismatchError: If the vectors do not fit the store.
        """
        if not items:
            return []

        records = [DocumentRecord(content=text, metadata=dict(metadata)) for text, metadata in items]
        texts = [record.content for record in records]
        vectors = await self.provider.embed_documents(texts)
        if len(vectors) != len(texts):
            raise ProviderContractViolationError(len(texts), len(vectors))

        identifiers = self.store.append(records, vectors)
        logger.info("Ingested {count} documents", count=len(identifiers), size=self.store.size())
        return identifiers

    async def ingest_products(self, products: Iterable[Product]) -> list[DocumentId]:
        """Ingest catalog products as ``"<name> - <description> - <price>"`` texts."""
        return await self.ingest(products_to_items(products))
