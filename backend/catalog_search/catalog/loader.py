"""JSON product catalog loading.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
import json
from pathlib import Path
from typing import TYPE_CHECKING

# Third-party (alphabetical)
from pydantic import TypeAdapter, ValidationError

# Local imports (core first, then alphabetical)
from catalog_search.core.exceptions import CatalogLoadError
from catalog_search.infra.instrumentation import get_logger

from .models import Product

if TYPE_CHECKING:
    from collections.abc import Iterable

    from catalog_search.core.types import IngestItem

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("load_catalog", "parse_catalog", "products_to_items")

logger = get_logger("catalog.loader")

_PRODUCTS_ADAPTER: TypeAdapter[list[Product]] = TypeAdapter(list[Product])


# =============================================================================
# Section 12: Functions
# =============================================================================
def load_catalog(path: str | Path) -> list[Product]:
    """Read a JSON array of ``{id, name, description, price}`` objects.

    Args:
        path: Catalog file location.

    Returns:
        Validated products in file order.

    Raises:
        CatalogLoadError: If the file is missing, unreadable or malformed.
    """
    catalog_path = Path(path)
    try:
        raw = catalog_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CatalogLoadError(str(catalog_path), exc.strerror or str(exc)) from exc

    products = parse_catalog(raw, source=str(catalog_path))
    logger.info("Loaded {count} products", count=len(products), path=str(catalog_path))
    return products


def parse_catalog(raw: str, *, source: str = "<string>") -> list[Product]:
    """Parse catalog JSON text into products."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise CatalogLoadError(source, f"invalid JSON: {exc.msg}") from exc
    if not isinstance(data, list):
        raise CatalogLoadError(source, f"expected a JSON array, got {type(data).__name__}")

    try:
        return _PRODUCTS_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise CatalogLoadError(source, f"{exc.error_count()} invalid product entries") from exc


def products_to_items(products: Iterable[Product]) -> list[IngestItem]:
    """Convert products into ``(content, metadata)`` ingestion items."""
    return [(product.content, product.metadata) for product in products]
