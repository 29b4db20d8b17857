"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from catalog.domain.model.product import Product
from catalog.domain.service.product_query import Pagination


@dataclass(frozen=True)
class ProductInput:
    """Input: fields a client may supply when creating or editing.

    ``None`` means "not supplied". On create that is a validation
    failure; on update it keeps the current value.
    """

    title: str | None = None
    price: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> ProductInput:
        """Build from loosely-typed request data; unknown keys are ignored."""
        title = data.get("title")
        price = data.get("price")
        return cls(
            title=None if title is None else str(title),
            price=None if price is None else str(price),
        )


@dataclass(frozen=True)
class ProductDTO:
    """Output: a single product as displayed to the user."""

    id: int
    title: str
    price: float
    formatted_price: str  # e.g. "$1,299.50"
    created_at: str  # ISO-8601

    @classmethod
    def from_product(cls, product: Product) -> ProductDTO:
        return cls(
            id=product.id,  # type: ignore[arg-type]
            title=product.title,
            price=float(product.price),
            formatted_price=str(product.price),
            created_at=product.created_at_iso,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "price": self.price,
            "formatted_price": self.formatted_price,
            "created_at": self.created_at,
        }


@dataclass(frozen=True)
class ProductPageDTO:
    """Output: one page of a product listing.

    ``pagination`` is None when the catalog could not be read.
    """

    products: list[ProductDTO]
    pagination: Pagination | None

    def pagination_dict(self) -> dict:
        return self.pagination.to_dict() if self.pagination is not None else {}
