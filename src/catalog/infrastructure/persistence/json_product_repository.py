"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import logging

from catalog.domain.exceptions import EntityNotFoundError, ValidationError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.persistence.json_document_store import JsonDocumentStore

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):
    """Products stored in the ``products`` array of a JsonDocumentStore.

    Every mutation is a read-modify-write of the whole document, done
    while holding the store lock so concurrent writers cannot both
    read the same ``next_id``.
    """

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        for raw in self._store.read()["products"]:
            if raw["id"] == product_id:
                try:
                    return self._to_domain(raw)
                except ValidationError as exc:
                    logger.warning("Stored product %s is invalid: %s", product_id, exc)
                    return None
        return None

    def list_all(self) -> list[Product]:
        products: list[Product] = []
        for raw in self._store.read()["products"]:
            try:
                products.append(self._to_domain(raw))
            except ValidationError as exc:
                logger.warning("Skipping invalid product record %s: %s", raw.get("id"), exc)
        return products

    def add(self, product: Product) -> Product:
        with self._store.locked():
            document = self._store.read()
            new_id = document["next_id"]
            stored = product.with_id(new_id)
            document["products"].append(self._to_raw(stored))
            document["next_id"] = new_id + 1
            self._store.write(document)
        return stored

    def save(self, product: Product) -> None:
        with self._store.locked():
            document = self._store.read()
            index = self._index_of(document, product.id)
            # created_at is fixed at creation time.
            pinned = product.with_created_at(document["products"][index]["created_at"])
            document["products"][index] = self._to_raw(pinned)
            self._store.write(document)

    def delete(self, product_id: int) -> None:
        with self._store.locked():
            document = self._store.read()
            index = self._index_of(document, product_id)
            del document["products"][index]
            self._store.write(document)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return product.to_record()

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product.from_record(raw)

    # --- Document helpers -----------------------------------------------------

    @staticmethod
    def _index_of(document: dict, product_id: int | None) -> int:
        for i, raw in enumerate(document["products"]):
            if raw["id"] == product_id:
                return i
        raise EntityNotFoundError(f"Product with ID {product_id} not found")
