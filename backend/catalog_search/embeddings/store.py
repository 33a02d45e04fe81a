"""In-memory vector store.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# Standard library (alphabetical)
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

# Local imports (core first, then alphabetical)
from catalog_search.core.constants import MEMORY_STORE_TYPE
from catalog_search.core.exceptions import DimensionMismatchError, DocumentNotFoundError
from catalog_search.infra.instrumentation import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence

    from catalog_search.core.types import DocumentId, Embedding

__all__ = ("DocumentRecord", "VectorStore")

logger = get_logger("embeddings.store")


@dataclass(frozen=True, slots=True)
class DocumentRecord:
    """Text that was embedded plus its metadata."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


class VectorStore:
    """Parallel-array store of documents and their embedding vectors.

    The position of a document in the store is its identifier. Identifiers
    start at 0 and only restart after an unfiltered :meth:`clear`.
    """

    def __init__(self) -> None:
        self._documents: list[DocumentRecord] = []
        self._vectors: list[tuple[float, ...]] = []
        self._dimension: int | None = None

    def __len__(self) -> int:
        return len(self._documents)

    @property
    def store_type(self) -> str:
        """Identifier of the storage strategy."""
        return MEMORY_STORE_TYPE

    @property
    def dimension(self) -> int | None:
        """Established vector dimension, ``None`` while the store is empty."""
        return self._dimension

    def size(self) -> int:
        """Return the number of stored documents."""
        return len(self._documents)

    def append(self, records: Sequence[DocumentRecord], vectors: Sequence[Embedding]) -> list[DocumentId]:
        """Append records and vectors in lock-step.

        Every vector is checked before anything is stored, so a failing batch
        leaves the store unchanged.

        Args:
            records: Documents to store.
            vectors: One vector per document, in the same order.

        Returns:
            Identifiers assigned to the new documents, in input order.

        Raises:
            ValueError: If ``records`` and ``vectors`` differ in length.
            DimensionMismatchError: If a vector does not match the store's
                dimension (or the first vector of the batch when empty).
        """
        if len(records) != len(vectors):
            raise ValueError("records and vectors length mismatch")
        if not records:
            return []

        normalized = [tuple(float(value) for value in vector) for vector in vectors]
        dimension = self._dimension if self._dimension is not None else len(normalized[0])
        for vector in normalized:
            if len(vector) != dimension:
                raise DimensionMismatchError(dimension, len(vector))

        start = len(self._documents)
        self._documents.extend(records)
        self._vectors.extend(normalized)
        self._dimension = dimension
        logger.debug("Appended {count} documents", count=len(records), size=len(self._documents))
        return list(range(start, len(self._documents)))

    def get(self, identifier: DocumentId) -> DocumentRecord:
        """Return the document stored under ``identifier``.

        Raises:
            DocumentNotFoundError: If the identifier is out of range.
        """
        self._check_identifier(identifier)
        return self._documents[identifier]

    def vector(self, identifier: DocumentId) -> tuple[float, ...]:
        """Return the vector stored under ``identifier``."""
        self._check_identifier(identifier)
        return self._vectors[identifier]

    def items(self) -> Iterator[tuple[DocumentId, DocumentRecord, tuple[float, ...]]]:
        """Iterate ``(identifier, record, vector)`` in insertion order."""
        for identifier, (record, vector) in enumerate(zip(self._documents, self._vectors, strict=True)):
            yield identifier, record, vector

    def clear(self, filter: Mapping[str, Any] | None = None) -> None:  # noqa: A002
        """Remove every document when ``filter`` is absent or empty.

        Filtered deletion is not supported: a non-empty ``filter`` leaves the
        store untouched and does not raise.
        """
        if filter:
            logger.debug("Ignoring filtered clear", filter=dict(filter))
            return
        self._documents = []
        self._vectors = []
        self._dimension = None
        logger.debug("Cleared vector store")

    def _check_identifier(self, identifier: DocumentId) -> None:
        if not 0 <= identifier < len(self._documents):
            raise DocumentNotFoundError(identifier, len(self._documents))
