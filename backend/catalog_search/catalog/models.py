"""Product catalog models.

All models are immutable (frozen=True) to prevent accidental mutation.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

from catalog_search.core.constants import CONTENT_SEPARATOR, SOURCE_KEY

__all__ = ['Product']


class Product(BaseModel):
    """Single catalog entry.

    The embedded text is ``"<name> - <description> - <price>"`` and the
    metadata links back to the entry through ``source``.
    """

    model_config = ConfigDict(
        frozen=True,
        extra='ignore',
    )

    id: str | int = Field(description='Catalog identifier, kept as written in the file')
    name: str = Field(description='Product name')
    description: str = Field(default='', description='Free-text description')
    price: int | float | str = Field(description='Price as listed in the catalog')

    @computed_field
    @property
    def content(self) -> str:
        """Text handed to the embedding provider."""
        return CONTENT_SEPARATOR.join((self.name, self.description, _format_price(self.price)))

    @property
    def metadata(self) -> dict[str, Any]:
        """Metadata stored alongside the embedded text."""
        return {SOURCE_KEY: self.id}


def _format_price(price: int | float | str) -> str:
    # Whole floats render without a trailing ".0"
    if isinstance(price, float) and price.is_integer():
        return str(int(price))
    return str(price)
