"""Product aggregate.

A product is the only aggregate in the catalog. Instances are frozen:
"editing" a product always produces a new value through a validating
factory, so an invalid product can never be constructed.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timezone

from catalog.domain.exceptions import FieldError, ValidationError
from catalog.domain.model.value_objects import Price
from catalog.domain.service.sanitizer import (
    price_errors,
    sanitize_price,
    sanitize_title,
    title_errors,
)


def utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(microsecond=0)


def _coerce_timestamp(value: datetime | str | None) -> datetime:
    if value is None:
        return utc_now()
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError.from_errors(
            [FieldError("created_at", f"Invalid timestamp: {value!r}")]
        ) from exc


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    Use ``Product.create()`` for anything built from outside input; it
    sanitizes both fields and reports every failing field at once. The
    ``__init__`` stays plain so ``dataclasses.replace`` keeps working
    on already-validated values.
    """

    id: int | None
    title: str
    price: Price
    created_at: datetime

    # --- Factories ------------------------------------------------------------

    @classmethod
    def create(
        cls,
        title: object,
        price: object,
        *,
        id: int | None = None,
        created_at: datetime | str | None = None,
    ) -> Product:
        """Normalize and validate raw input into a Product."""
        clean_title = sanitize_title(title)
        clean_price = sanitize_price(price)

        errors = [FieldError("title", msg) for msg in title_errors(clean_title)]
        errors += [FieldError("price", msg) for msg in price_errors(clean_price)]
        if id is not None and (isinstance(id, bool) or not isinstance(id, int) or id < 1):
            errors.append(FieldError("id", "ID must be a positive integer"))
        if errors:
            raise ValidationError.from_errors(errors)

        return cls(
            id=id,
            title=clean_title,
            price=Price(clean_price),
            created_at=_coerce_timestamp(created_at),
        )

    @classmethod
    def from_record(cls, raw: dict) -> Product:
        """Rebuild a product from its stored representation."""
        return cls.create(
            raw.get("title", ""),
            raw.get("price", 0),
            id=raw.get("id"),
            created_at=raw.get("created_at"),
        )

    # --- Functional updates ---------------------------------------------------

    def with_changes(
        self,
        title: object | None = None,
        price: object | None = None,
    ) -> Product:
        """Return a re-validated copy with *title* and/or *price* replaced.

        ``id`` and ``created_at`` are carried over unchanged.
        """
        return Product.create(
            self.title if title is None else title,
            self.price.amount if price is None else price,
            id=self.id,
            created_at=self.created_at,
        )

    def with_id(self, product_id: int) -> Product:
        if isinstance(product_id, bool) or not isinstance(product_id, int) or product_id < 1:
            raise ValidationError.from_errors(
                [FieldError("id", "ID must be a positive integer")]
            )
        return replace(self, id=product_id)

    def with_created_at(self, created_at: datetime | str) -> Product:
        return replace(self, created_at=_coerce_timestamp(created_at))

    # --- Representation -------------------------------------------------------

    @property
    def created_at_iso(self) -> str:
        return self.created_at.isoformat(timespec="seconds")

    def to_record(self) -> dict:
        """Wire representation stored in the JSON document."""
        return {
            "id": self.id,
            "title": self.title,
            "price": float(self.price.amount),
            "created_at": self.created_at_iso,
        }
