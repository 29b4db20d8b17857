"""Unit tests for title and price normalization."""

from decimal import Decimal

from catalog.domain.service.sanitizer import (
    price_errors,
    sanitize_price,
    sanitize_title,
    title_errors,
)


class TestSanitizeTitle:

    def test_trims_whitespace(self):
        assert sanitize_title("  Widget  ") == "Widget"

    def test_strips_null_bytes_and_control_characters(self):
        assert sanitize_title("Wid\x00get\x0b") == "Widget"

    def test_strips_markup_tags(self):
        assert sanitize_title("<b>Bold</b> Widget") == "Bold Widget"

    def test_escapes_remaining_special_characters(self):
        assert sanitize_title("Salt & Pepper") == "Salt &amp; Pepper"

    def test_none_becomes_empty(self):
        assert sanitize_title(None) == ""

    def test_unicode_letters_preserved(self):
        assert sanitize_title("Café Olé") == "Café Olé"

    def test_decomposed_letters_are_composed(self):
        assert sanitize_title("Cafe\u0301") == "Caf\u00e9"


class TestTitleErrors:

    def test_valid_title(self):
        assert title_errors("Widget Pro-2_v1.5") == []

    def test_unicode_letters_allowed(self):
        assert title_errors("Ñandú Über") == []

    def test_combining_marks_allowed(self):
        # No precomposed form exists for q with dot above.
        assert title_errors("Aq\u0307a") == []

    def test_lone_combining_mark_rejected(self):
        assert "may only contain" in title_errors("\u0301")[0]

    def test_empty_rejected(self):
        assert title_errors("") == ["Title is required"]

    def test_length_boundaries(self):
        assert title_errors("a") == []
        assert title_errors("a" * 255) == []
        assert title_errors("a" * 256) == ["Title must be between 1 and 255 characters"]

    def test_disallowed_characters_rejected(self):
        errors = title_errors(sanitize_title("Salt & Pepper"))
        assert len(errors) == 1
        assert "may only contain" in errors[0]


class TestSanitizePrice:

    def test_plain_number(self):
        assert sanitize_price("19.99") == Decimal("19.99")

    def test_strips_currency_symbols_and_separators(self):
        assert sanitize_price("$1,299.50") == Decimal("1299.50")

    def test_unparseable_defaults_to_zero(self):
        assert sanitize_price("abc") == Decimal("0.00")
        assert sanitize_price("1.2.3") == Decimal("0.00")
        assert sanitize_price(None) == Decimal("0.00")

    def test_rounds_to_two_places(self):
        assert sanitize_price("10.555") == Decimal("10.56")

    def test_keeps_sign(self):
        assert sanitize_price("-5") == Decimal("-5.00")

    def test_accepts_numbers(self):
        assert sanitize_price(25) == Decimal("25.00")
        assert sanitize_price(Decimal("3.5")) == Decimal("3.50")


class TestPriceErrors:

    def test_boundaries(self):
        assert price_errors(Decimal("0.01")) == []
        assert price_errors(Decimal("999999.99")) == []
        assert price_errors(Decimal("0.00")) == ["Price must be greater than zero"]
        assert price_errors(Decimal("1000000.00")) == ["Price must not exceed 999999.99"]

    def test_negative_rejected(self):
        assert price_errors(Decimal("-3")) == ["Price must be greater than zero"]
