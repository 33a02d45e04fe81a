"""Type aliases for catalog-search.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
from collections.abc import Mapping, Sequence
from typing import Any, TypeAlias

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = (
    "DocumentId",
    "Embedding",
    "Metadata",
    "IngestItem",
    "SearchResult",
)

# =============================================================================
# Section 3: Type Aliases
# =============================================================================
DocumentId: TypeAlias = int
"""Insertion-order index of a document within a store."""

Embedding: TypeAlias = Sequence[float]
"""Fixed-dimension embedding vector."""

Metadata: TypeAlias = Mapping[str, Any]
"""Arbitrary document metadata; carries at least a ``source`` key."""

IngestItem: TypeAlias = tuple[str, Metadata]
"""Raw ``(text, metadata)`` pair accepted by the ingestion pipeline."""

SearchResult: TypeAlias = dict[str, Any]
"""Flattened search hit: metadata keys plus ``content`` and ``score``."""
