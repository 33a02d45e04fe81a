"""Module-level constants for catalog-search.

All constants are declared with Final type annotation for immutability
and IDE support.
"""
from __future__ import annotations

from typing import Final

# =============================================================================
# Section 1: Module Exports
# =============================================================================
__all__ = [
    # Search
    'DEFAULT_TOP_K',
    'SOURCE_KEY',
    # Store
    'MEMORY_STORE_TYPE',
    # Embeddings
    'DEFAULT_EMBEDDING_MODEL',
    # Catalog
    'DEFAULT_CATALOG_PATH',
    'CONTENT_SEPARATOR',
    # Front-end
    'EXIT_COMMANDS',
    'DEFAULT_PROMPT',
]

# =============================================================================
# Section 2: Search Constants
# =============================================================================
DEFAULT_TOP_K: Final[int] = 3
SOURCE_KEY: Final[str] = 'source'

# =============================================================================
# Section 3: Store Constants
# =============================================================================
MEMORY_STORE_TYPE: Final[str] = 'memory'

# =============================================================================
# Section 4: Embedding Constants
# =============================================================================
DEFAULT_EMBEDDING_MODEL: Final[str] = 'openai:text-embedding-3-small'

# =============================================================================
# Section 5: Catalog Constants
# =============================================================================
DEFAULT_CATALOG_PATH: Final[str] = 'products.json'
CONTENT_SEPARATOR: Final[str] = ' - '

# =============================================================================
# Section 6: Front-end Constants
# =============================================================================
EXIT_COMMANDS: Final[frozenset[str]] = frozenset({'exit', 'quit'})
DEFAULT_PROMPT: Final[str] = 'search> '
