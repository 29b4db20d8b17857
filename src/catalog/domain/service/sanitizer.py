"""Input normalization for product fields.

Raw user input passes through here before any business rule is
checked. Normalization never rejects anything; rejection is the job
of the validators below, which report *why* a value is unacceptable.
"""

from __future__ import annotations

import html
import re
import unicodedata
from decimal import Decimal

from catalog.domain.model.value_objects import MAX_PRICE, parse_decimal, quantize_price

TITLE_MAX_LENGTH = 255

_TAG_RE = re.compile(r"<[^>]*>")
_NON_NUMERIC_RE = re.compile(r"[^0-9.\-]")
_TITLE_ALLOWED_RE = re.compile(r"[\w .\-]+")


def sanitize_title(raw: object) -> str:
    """Strip control characters and markup, escape the rest, trim."""
    text = "" if raw is None else str(raw)
    text = "".join(ch for ch in text if unicodedata.category(ch) != "Cc")
    text = unicodedata.normalize("NFC", text)
    text = _TAG_RE.sub("", text)
    text = html.escape(text, quote=True)
    return text.strip()


def sanitize_price(raw: object) -> Decimal:
    """Coerce arbitrary input to a two-decimal amount.

    Everything except digits, ``.`` and ``-`` is dropped first, so
    ``"$1,299.50"`` becomes ``1299.50``. Unparseable input yields 0.
    """
    if isinstance(raw, Decimal):
        cleaned = raw if raw.is_finite() else None
    else:
        cleaned = parse_decimal(_NON_NUMERIC_RE.sub("", "" if raw is None else str(raw)))
    if cleaned is None:
        cleaned = Decimal("0")
    return quantize_price(cleaned)


def title_errors(title: str) -> list[str]:
    """Return the reasons a normalized title is unacceptable."""
    if not title:
        return ["Title is required"]
    if len(title) > TITLE_MAX_LENGTH:
        return [f"Title must be between 1 and {TITLE_MAX_LENGTH} characters"]
    # Combining marks left over after NFC count as part of their letter.
    bare = "".join(ch for ch in title if not unicodedata.category(ch).startswith("M"))
    if not _TITLE_ALLOWED_RE.fullmatch(bare):
        return [
            "Title may only contain letters, digits, spaces, hyphens, "
            "underscores and dots"
        ]
    return []


def price_errors(price: Decimal) -> list[str]:
    """Return the reasons a normalized price is unacceptable."""
    if price <= Decimal("0"):
        return ["Price must be greater than zero"]
    if price > MAX_PRICE:
        return [f"Price must not exceed {MAX_PRICE}"]
    return []
