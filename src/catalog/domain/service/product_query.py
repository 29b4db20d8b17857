"""In-memory query engine: filter, sort and paginate products.

Every function here is pure. Callers load the full product set once
per request and hand it in; nothing is cached between calls.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Callable

from catalog.domain.model.product import Product

SORT_FIELDS = ("id", "title", "price", "created_at")
DEFAULT_SORT_FIELD = "id"
DEFAULT_ORDER = "asc"
DEFAULT_PER_PAGE = 10
MAX_PER_PAGE = 100


@dataclass(frozen=True)
class ProductFilters:
    """Optional, conjunctive filter criteria. ``None`` means "no bound"."""

    min_price: Decimal | None = None
    max_price: Decimal | None = None
    date_from: str | None = None
    date_to: str | None = None
    search: str | None = None


@dataclass(frozen=True)
class ProductQuery:
    filters: ProductFilters = field(default_factory=ProductFilters)
    sort_by: str = DEFAULT_SORT_FIELD
    order: str = DEFAULT_ORDER
    page: int = 1
    per_page: int = DEFAULT_PER_PAGE


@dataclass(frozen=True)
class Pagination:
    current_page: int
    per_page: int
    total_items: int
    total_pages: int
    has_next: bool
    has_prev: bool

    def to_dict(self) -> dict:
        return {
            "current_page": self.current_page,
            "per_page": self.per_page,
            "total_items": self.total_items,
            "total_pages": self.total_pages,
            "has_next": self.has_next,
            "has_prev": self.has_prev,
        }


@dataclass(frozen=True)
class QueryResult:
    """A page of products. ``pagination`` is None when the read failed."""

    products: list[Product]
    pagination: Pagination | None


# ---------------------------------------------------------------------------
# Filtering
# ---------------------------------------------------------------------------


def apply_filters(products: list[Product], filters: ProductFilters) -> list[Product]:
    """Keep products matching every criterion set in *filters*."""
    predicates: list[Callable[[Product], bool]] = []

    if filters.min_price is not None:
        min_price = filters.min_price
        predicates.append(lambda p: p.price.amount >= min_price)
    if filters.max_price is not None:
        max_price = filters.max_price
        predicates.append(lambda p: p.price.amount <= max_price)

    # ISO-8601 strings order chronologically, so plain comparison works.
    if filters.date_from:
        date_from = filters.date_from
        predicates.append(lambda p: p.created_at_iso >= date_from)
    if filters.date_to:
        date_to = filters.date_to
        predicates.append(lambda p: p.created_at_iso <= date_to)

    if filters.search and filters.search.strip():
        needle = filters.search.strip().casefold()
        predicates.append(lambda p: needle in p.title.casefold())

    return [p for p in products if all(pred(p) for pred in predicates)]


# ---------------------------------------------------------------------------
# Sorting
# ---------------------------------------------------------------------------


def normalize_sort(sort_by: str | None, order: str | None) -> tuple[str, str]:
    """Fall back to ``id`` / ``asc`` for anything unrecognized."""
    field_name = sort_by if sort_by in SORT_FIELDS else DEFAULT_SORT_FIELD
    direction = "desc" if (order or "").strip().lower() == "desc" else "asc"
    return field_name, direction


_SORT_KEYS: dict[str, Callable[[Product], object]] = {
    "id": lambda p: p.id or 0,
    "title": lambda p: p.title.casefold(),
    "price": lambda p: p.price.amount,
    "created_at": lambda p: p.created_at_iso,
}


def apply_sorting(
    products: list[Product], sort_by: str | None, order: str | None
) -> list[Product]:
    field_name, direction = normalize_sort(sort_by, order)
    return sorted(products, key=_SORT_KEYS[field_name], reverse=direction == "desc")


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------


def clamp_page(page: int, per_page: int) -> tuple[int, int]:
    return max(1, page), max(1, min(MAX_PER_PAGE, per_page))


def paginate(
    products: list[Product], page: int, per_page: int
) -> tuple[list[Product], Pagination]:
    """Slice one page out of *products*.

    Out-of-range pages give an empty slice, not an error.
    """
    page, per_page = clamp_page(page, per_page)
    total_items = len(products)
    total_pages = math.ceil(total_items / per_page)
    offset = (page - 1) * per_page

    pagination = Pagination(
        current_page=page,
        per_page=per_page,
        total_items=total_items,
        total_pages=total_pages,
        has_next=page < total_pages,
        has_prev=page > 1,
    )
    return products[offset : offset + per_page], pagination


def run_query(products: list[Product], query: ProductQuery) -> QueryResult:
    """Filter, then sort, then paginate."""
    matching = apply_filters(products, query.filters)
    ordered = apply_sorting(matching, query.sort_by, query.order)
    page_items, pagination = paginate(ordered, query.page, query.per_page)
    return QueryResult(products=page_items, pagination=pagination)
