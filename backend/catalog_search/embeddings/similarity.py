"""Cosine similarity scoring and exhaustive top-k selection.

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

# Third-party (alphabetical)
import logfire
import numpy as np

# Local imports (core first, then alphabetical)
from catalog_search.core.exceptions import DimensionMismatchError

if TYPE_CHECKING:
    from catalog_search.core.types import Embedding

    from .store import DocumentRecord, VectorStore

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("cosine_similarity", "top_k")


# =============================================================================
# Section 12: Functions
# =============================================================================
def cosine_similarity(left: Embedding, right: Embedding) -> float:
    """Return the cosine of the angle between two vectors.

    A zero-magnitude vector on either side scores ``0.0`` rather than NaN,
    and the result is clamped to ``[-1, 1]``.

    Raises:
        DimensionMismatchError: If the vectors differ in length.
    """
    left_vec = np.asarray(left, dtype=float)
    right_vec = np.asarray(right, dtype=float)
    if left_vec.shape != right_vec.shape:
        raise DimensionMismatchError(left_vec.shape[0], right_vec.shape[0])

    left_norm = np.linalg.norm(left_vec)
    right_norm = np.linalg.norm(right_vec)
    if left_norm == 0 or right_norm == 0:
        return 0.0
    # Rounding can push the ratio just outside [-1, 1]
    return float(np.clip(np.dot(left_vec, right_vec) / (left_norm * right_norm), -1.0, 1.0))


def top_k(store: VectorStore, query: Embedding, k: int) -> list[tuple[DocumentRecord, float]]:
    """Rank every stored document against ``query`` and keep the best ``k``.

    Scores are sorted descending. Equal scores are ordered by ascending
    identifier, so earlier insertions win ties.

    Args:
        store: Store to scan.
        query: Query vector.
        k: Number of results wanted.

    Returns:
        ``min(k, store.size())`` pairs of ``(record, score)``.

    Raises:
        DimensionMismatchError: If the query does not match a non-empty
            store's dimension.
    """
    size = store.size()
    if k <= 0 or size == 0:
        return []

    query_vec = np.asarray(query, dtype=float)
    if store.dimension != query_vec.shape[0]:
        raise DimensionMismatchError(store.dimension or 0, query_vec.shape[0])

    with logfire.span("top_k scan", size=size, k=k):
        matrix = np.array([vector for _, _, vector in store.items()], dtype=float)
        norms = np.linalg.norm(matrix, axis=1)
        query_norm = np.linalg.norm(query_vec)

        denominators = norms * query_norm
        dots = matrix @ query_vec
        scores = np.divide(dots, denominators, out=np.zeros(size, dtype=float), where=denominators != 0)
        np.clip(scores, -1.0, 1.0, out=scores)

        # lexsort uses the last key as primary: descending score, then identifier
        identifiers = np.arange(size)
        order = np.lexsort((identifiers, -scores))[: min(k, size)]

    return [(store.get(int(i)), float(scores[i])) for i in order]
