"""Application service: Delete Product use case."""

from __future__ import annotations

import logging

from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> None:
        """Remove a product. Its ID is never handed out again."""
        self._product_repo.delete(product_id)
        logger.info("Deleted product %s", product_id)
