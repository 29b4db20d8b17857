"""Application service: Search Products use case (query)."""

from __future__ import annotations

import logging

from catalog.application.dto import ProductDTO
from catalog.domain.exceptions import StorageError
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.product_query import ProductFilters, apply_filters

logger = logging.getLogger(__name__)


class SearchProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, text: str) -> list[ProductDTO]:
        """Case-insensitive title search, unpaginated. Blank text matches all."""
        try:
            products = self._product_repo.list_all()
        except StorageError as exc:
            logger.error("Search failed, returning no results: %s", exc)
            return []

        matches = apply_filters(products, ProductFilters(search=text))
        return [ProductDTO.from_product(p) for p in matches]
