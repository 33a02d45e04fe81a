"""Exception hierarchy for catalog-search.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

# Standard library (alphabetical)
from typing import Any

__all__ = (
    'CatalogSearchError',
    'DimensionMismatchError',
    'DocumentNotFoundError',
    'ProviderError',
    'ProviderContractViolationError',
    'ProviderFailureError',
    'CatalogLoadError',
)


class CatalogSearchError(Exception):
    """Base exception for all catalog-search errors.

    All exceptions in the system inherit from this class, enabling
    catch-all handling at the front-end boundary.

    Attributes:
        context: Additional context for debugging.
        recoverable: Whether the error can potentially be recovered.
    """

    def __init__(self, message: str, *, context: dict[str, Any] | None = None, recoverable: bool = True) -> None:
        self.context = context or {}
        self.recoverable = recoverable
        super().__init__(message)


# =============================================================================
# Store Exceptions
# =============================================================================
class DimensionMismatchError(CatalogSearchError):
    """Raised when a vector length differs from the established dimension."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f'Vector dimension mismatch: expected {expected}, got {actual}',
            context={'expected': expected, 'actual': actual},
        )


class DocumentNotFoundError(CatalogSearchError):
    """Raised when an identifier is outside the store's range."""

    def __init__(self, identifier: int, size: int) -> None:
        self.identifier = identifier
        self.size = size
        super().__init__(
            f'Document not found: {identifier} (store holds {size} documents)',
            context={'identifier': identifier, 'size': size},
        )


# =============================================================================
# Provider Exceptions
# =============================================================================
class ProviderError(CatalogSearchError):
    """Base exception for embedding provider errors."""


class ProviderContractViolationError(ProviderError):
    """Raised when a batch embedding returns the wrong number of vectors."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f'Embedding provider returned {actual} vectors for {expected} texts',
            context={'expected': expected, 'actual': actual},
            recoverable=False,
        )


class ProviderFailureError(ProviderError):
    """Raised when the embedding provider itself fails."""

    def __init__(self, provider: str, message: str, *, cause: Exception | None = None) -> None:
        self.provider = provider
        self.cause = cause
        ctx: dict[str, Any] = {'provider': provider}
        if cause:
            ctx['cause_type'] = type(cause).__name__
        super().__init__(f'[{provider}] {message}', context=ctx)


# =============================================================================
# Catalog Exceptions
# =============================================================================
class CatalogLoadError(CatalogSearchError):
    """Raised when the product catalog cannot be read or parsed."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f'Failed to load catalog {path}: {message}', context={'path': path}, recoverable=False)
