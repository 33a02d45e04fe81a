"""Product catalog loading.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# Local imports (core first, then alphabetical)
from .loader import load_catalog, parse_catalog, products_to_items
from .models import Product

__all__ = (
    "load_catalog",
    "parse_catalog",
    "products_to_items",
    "Product",
)
