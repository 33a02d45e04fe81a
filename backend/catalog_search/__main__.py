"""Command-line entry point for catalog-search.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
import sys

# Local imports (core first, then alphabetical)
from .cli import main

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("main",)


if __name__ == "__main__":
    sys.exit(main())
