"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from catalog.application.dto import ProductDTO, ProductInput
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int, request: ProductInput) -> ProductDTO:
        """Replace the title and/or price of an existing product.

        Fields left as None keep their current value. The ID and the
        creation timestamp never change.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID {product_id} not found")

        updated = product.with_changes(title=request.title, price=request.price)
        self._product_repo.save(updated)
        logger.info("Updated product %s", product_id)
        return ProductDTO.from_product(updated)
