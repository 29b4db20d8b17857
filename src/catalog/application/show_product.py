"""Application service: Show Product use case (query)."""

from __future__ import annotations

import logging

from catalog.application.dto import ProductDTO
from catalog.domain.exceptions import EntityNotFoundError, StorageError
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> ProductDTO:
        try:
            product = self._product_repo.get_by_id(product_id)
        except StorageError:
            logger.exception("Could not read product %s", product_id)
            product = None
        if product is None:
            raise EntityNotFoundError(f"Product with ID {product_id} not found")
        return ProductDTO.from_product(product)
