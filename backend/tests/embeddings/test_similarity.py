"""Tests for cosine similarity and top-k ranking.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

import math

import numpy as np
import pytest

from catalog_search.core.exceptions import DimensionMismatchError
from catalog_search.embeddings.similarity import cosine_similarity, top_k
from catalog_search.embeddings.store import DocumentRecord, VectorStore

__all__ = ()


def _fill(store: VectorStore, vectors: list[list[float]]) -> None:
    records = [DocumentRecord(content=f"doc {i}", metadata={"source": f"p{i}"}) for i in range(len(vectors))]
    store.append(records, vectors)


class TestCosineSimilarity:
    """Tests for cosine_similarity."""

    @pytest.mark.parametrize("vector", [[1.0, 0.0], [3.0, 4.0], [0.2, -0.7, 1.3]])
    def test_self_similarity(self, vector: list[float]) -> None:
        """A non-zero vector should be fully similar to itself."""
        assert cosine_similarity(vector, vector) == pytest.approx(1.0)

    def test_scale_invariance(self) -> None:
        """Positive scaling should not change the score."""
        left = [0.3, 0.9, -0.2]
        right = [1.0, 0.5, 0.25]
        base = cosine_similarity(left, right)

        assert cosine_similarity([v * 7.5 for v in left], right) == pytest.approx(base)
        assert cosine_similarity(left, [v * 0.01 for v in right]) == pytest.approx(base)

    def test_orthogonal_and_opposite(self) -> None:
        """Orthogonal vectors score 0 and opposite vectors score -1."""
        assert cosine_similarity([1.0, 0.0], [0.0, 1.0]) == 0.0
        assert cosine_similarity([1.0, 2.0], [-1.0, -2.0]) == pytest.approx(-1.0)

    def test_zero_vector_scores_zero(self) -> None:
        """Zero-magnitude vectors should score 0 instead of NaN."""
        score = cosine_similarity([0.0, 0.0], [1.0, 0.0])

        assert score == 0.0
        assert not math.isnan(score)

    def test_scores_stay_in_range(self) -> None:
        """Rounding should never push a score outside [-1, 1]."""
        rng = np.random.default_rng(7)
        vectors = rng.normal(size=(2000, 8))

        for vector in vectors:
            assert -1.0 <= cosine_similarity(vector, vector) <= 1.0
            assert -1.0 <= cosine_similarity(vector, -vector) <= 1.0

    def test_dimension_mismatch(self) -> None:
        """Vectors of different lengths should be rejected."""
        with pytest.raises(DimensionMismatchError):
            cosine_similarity([1.0, 0.0], [1.0, 0.0, 0.0])


class TestTopK:
    """Tests for top_k."""

    def test_ranking_order(self, store: VectorStore) -> None:
        """Results should be ordered by descending similarity."""
        _fill(store, [[0.0, 1.0], [1.0, 0.0], [0.6, 0.2]])

        results = top_k(store, [1.0, 0.0], 3)

        assert [record.metadata["source"] for record, _ in results] == ["p1", "p2", "p0"]
        scores = [score for _, score in results]
        assert scores == sorted(scores, reverse=True)

    @pytest.mark.parametrize(("k", "expected"), [(1, 1), (3, 3), (10, 3)])
    def test_length_is_min_of_k_and_size(self, store: VectorStore, k: int, expected: int) -> None:
        """Result length should be min(k, size)."""
        _fill(store, [[1.0, 0.0], [0.0, 1.0], [0.5, 0.5]])

        assert len(top_k(store, [1.0, 1.0], k)) == expected

    @pytest.mark.parametrize("k", [0, -2])
    def test_non_positive_k(self, store: VectorStore, k: int) -> None:
        """Non-positive k should return nothing."""
        _fill(store, [[1.0, 0.0]])

        assert top_k(store, [1.0, 0.0], k) == []

    def test_empty_store(self, store: VectorStore) -> None:
        """An empty store should return nothing, whatever the query."""
        assert top_k(store, [1.0, 0.0, 0.0], 3) == []

    def test_ties_break_by_identifier(self, store: VectorStore) -> None:
        """Equal scores should rank earlier insertions first."""
        _fill(store, [[0.0, 1.0], [2.0, 0.0], [1.0, 0.0], [0.0, 2.0]])

        results = top_k(store, [0.7, 0.7], 4)

        assert [record.metadata["source"] for record, _ in results] == ["p0", "p1", "p2", "p3"]
        scores = [score for _, score in results]
        assert len(set(scores)) == 1
        assert scores[0] == pytest.approx(1 / math.sqrt(2))

    def test_zero_vector_ranks_last(self, store: VectorStore) -> None:
        """Zero vectors should score 0 and not disturb the ranking."""
        _fill(store, [[0.0, 0.0], [1.0, 0.0]])

        results = top_k(store, [1.0, 0.0], 2)

        assert [record.metadata["source"] for record, _ in results] == ["p1", "p0"]
        assert results[1][1] == 0.0

    def test_query_dimension_mismatch(self, store: VectorStore) -> None:
        """Queries must match the store's dimension."""
        _fill(store, [[1.0, 0.0]])

        with pytest.raises(DimensionMismatchError, match="expected 2, got 3"):
            top_k(store, [1.0, 0.0, 0.0], 1)

    def test_scores_stay_in_range(self, store: VectorStore) -> None:
        """Scan scores should stay within [-1, 1] for arbitrary vectors."""
        rng = np.random.default_rng(11)
        vectors = rng.normal(size=(2000, 8))
        _fill(store, vectors.tolist())

        for query in vectors[:50]:
            results = top_k(store, query, store.size())
            assert all(-1.0 <= score <= 1.0 for _, score in results)
            assert results[0][1] == pytest.approx(1.0)
