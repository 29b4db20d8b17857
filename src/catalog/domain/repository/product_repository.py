"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON file, in-memory)
live in the infrastructure layer and the test suite.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def add(self, product: Product) -> Product:
        """Persist a new product and return it with its assigned ID.

        Any ID already set on *product* is ignored.
        """

    @abstractmethod
    def save(self, product: Product) -> None:
        """Replace an existing product.

        Raises EntityNotFoundError if no product has ``product.id``.
        """

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Remove a product. Raises EntityNotFoundError if absent."""
