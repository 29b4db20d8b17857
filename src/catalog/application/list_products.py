"""Application service: List Products use case (query).

Read paths degrade gracefully: if the catalog file cannot be read the
listing is simply empty, so a broken store never takes down the page.
"""

from __future__ import annotations

import logging

from catalog.application.dto import ProductDTO, ProductPageDTO
from catalog.domain.exceptions import StorageError
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.product_query import ProductQuery, run_query

logger = logging.getLogger(__name__)


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, query: ProductQuery | None = None) -> ProductPageDTO:
        query = query or ProductQuery()
        try:
            products = self._product_repo.list_all()
        except StorageError as exc:
            logger.error("Listing products failed, returning empty page: %s", exc)
            return ProductPageDTO(products=[], pagination=None)

        result = run_query(products, query)
        return ProductPageDTO(
            products=[ProductDTO.from_product(p) for p in result.products],
            pagination=result.pagination,
        )
