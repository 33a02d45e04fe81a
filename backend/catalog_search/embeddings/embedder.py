"""Embedding provider backed by pydantic-ai.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

# Standard library (alphabetical)
from collections.abc import Sequence
from functools import lru_cache
from importlib import import_module
from typing import Final, Protocol, cast, runtime_checkable

# Local imports (core first, then alphabetical)
from catalog_search.core.constants import DEFAULT_EMBEDDING_MODEL
from catalog_search.core.exceptions import ProviderFailureError
from catalog_search.infra.instrumentation import get_logger

__all__ = ("DEFAULT_MODEL", "PydanticAIEmbeddingProvider", "get_embedder")

DEFAULT_MODEL: Final[str] = DEFAULT_EMBEDDING_MODEL

logger = get_logger("embeddings.embedder")


@runtime_checkable
class EmbeddingResult(Protocol):
    """Protocol for pydantic-ai embedding results."""

    embeddings: Sequence[Sequence[float]]


@runtime_checkable
class Embedder(Protocol):
    """Protocol for the pydantic-ai Embedder."""

    def __init__(self, model: str) -> None: ...

    async def embed_documents(self, documents: Sequence[str]) -> EmbeddingResult:
        """Embed multiple documents."""
        ...

    async def embed_query(self, query: str) -> EmbeddingResult:
        """Embed a single query string."""
        ...


@lru_cache(maxsize=4)
def get_embedder(model: str = DEFAULT_MODEL) -> Embedder:
    """Get cached embedder instance.

    Args:
        model: Embedding model identifier.

    Returns:
        Configured Embedder instance.
    """
    embedder_cls = _resolve_embedder_class()
    return embedder_cls(model)


class PydanticAIEmbeddingProvider:
    """Embedding provider that delegates to ``pydantic_ai.Embedder``.

    Any exception raised by the model call is re-raised as
    :class:`ProviderFailureError` with the original exception chained.
    """

    def __init__(self, model: str = DEFAULT_MODEL) -> None:
        self.model = model

    async def embed_documents(self, texts: Sequence[str]) -> list[list[float]]:
        """Embed a batch of texts with a single model call.

        Args:
            texts: Documents to embed.

        Returns:
            List of embedding vectors, one per text.
        """
        logger.debug("Embedding {count} documents", count=len(texts), model=self.model)
        try:
            result = await get_embedder(self.model).embed_documents(list(texts))
        except Exception as exc:
            raise ProviderFailureError(self.model, f"embed_documents failed: {exc}", cause=exc) from exc
        return [list(vector) for vector in result.embeddings]

    async def embed_query(self, text: str) -> list[float]:
        """Embed query for similarity search.

        Args:
            text: Search query.

        Returns:
            Query embedding vector.
        """
        try:
            result = await get_embedder(self.model).embed_query(text)
        except Exception as exc:
            raise ProviderFailureError(self.model, f"embed_query failed: {exc}", cause=exc) from exc
        if not result.embeddings:
            raise ProviderFailureError(self.model, "embed_query returned no embedding")
        return list(result.embeddings[0])


def _resolve_embedder_class() -> type[Embedder]:
    """Resolve the Embedder implementation from pydantic_ai."""
    module = import_module("pydantic_ai")
    embedder_cls = getattr(module, "Embedder", None)
    if embedder_cls is None:  # pragma: no cover - optional dependency
        raise RuntimeError("pydantic_ai Embedder is not available")
    return cast("type[Embedder]", embedder_cls)
