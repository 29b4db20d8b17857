"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from catalog.application.dto import ProductDTO, ProductInput
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, request: ProductInput) -> ProductDTO:
        """Add a new product to the catalog.

        The ID is always assigned by the repository. Validation errors
        are raised before anything is written.
        """
        candidate = Product.create(request.title, request.price)
        product = self._product_repo.add(candidate)
        logger.info("Created product %s", product.id)
        return ProductDTO.from_product(product)
