"""Protocol definitions for embedding providers.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = ("EmbeddingProvider",)


@runtime_checkable
class EmbeddingProvider(Protocol):
    """Protocol for embedding providers.

    Providers turn text into fixed-dimension vectors. Implementations must be
    async-first: each call is the single suspension point of an ingest or a
    query, so a cancelled or failed call leaves the store untouched.

    Example Implementation:
        >>> class ConstantProvider:
        ...     async def embed_documents(self, texts):
        ...         return [[1.0, 0.0] for _ in texts]
        ...
        ...     async def embed_query(self, text):
        ...         return [1.0, 0.0]
    """

    @abstractmethod
    async def embed_documents(self, texts: Sequence[str]) -> list[list[float]]:
        """Embed a batch of texts.

        Args:
            texts: Texts to embed, in order.

        Returns:
            One vector per input text, in input order.

        Raises:
            ProviderFailureError: If the underlying model call fails.
        """
        ...

    @abstractmethod
    async def embed_query(self, text: str) -> list[float]:
        """Embed a single query string.

        Args:
            text: Query text.

        Returns:
            Query vector with the same dimension as document vectors.

        Raises:
            ProviderFailureError: If the underlying model call fails.
        """
        ...
