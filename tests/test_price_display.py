"""
Tests for the price display panel.
"""
import sys
import os

import pytest

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from pricing_utils.config.settings import reset_settings
from pricing_utils.engine import CurrencyFormat, InvalidArgument, build_price_display


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    monkeypatch.delenv('PRICING_CURRENCY_SYMBOL', raising=False)
    reset_settings()
    yield
    reset_settings()


def test_basic_price_information():
    display = build_price_display(100)

    assert display.title == "Price Information"
    assert display.get_line("original") == "Original Price: $100.00"
    assert display.get_line("final") == "Final Price: $100.00"
    assert display.get_line("discount") is None
    assert display.get_line("tax") is None


def test_discount_lines():
    display = build_price_display(100, discount_percentage=20)

    assert display.get_line("original") == "Original Price: $100.00"
    assert display.get_line("discount") == "Discount (20%): -$20.00"
    assert display.get_line("discounted") == "Discounted Price: $80.00"
    assert display.get_line("final") == "Final Price: $80.00"
    assert display.discount_amount == 20


def test_tax_line():
    display = build_price_display(100, tax_rate=10, show_tax=True)

    assert display.get_line("tax") == "Tax (10%): $10.00"
    assert display.get_line("final") == "Final Price: $110.00"


def test_discount_then_tax():
    display = build_price_display(100, discount_percentage=20, tax_rate=10, show_tax=True)

    assert display.texts()[1:6] == [
        "Original Price: $100.00",
        "Discount (20%): -$20.00",
        "Discounted Price: $80.00",
        "Tax (10%): $8.00",
        "Final Price: $88.00",
    ]
    assert display.tax_amount == 8
    assert display.final_price == 88


def test_in_stock_badge():
    display = build_price_display(100, quantity=5)

    assert display.in_stock is True
    assert display.stock_label == "In Stock (5)"
    assert display.stock_color == "success"


@pytest.mark.parametrize("quantity", [0, -3])
def test_out_of_stock_badge(quantity):
    display = build_price_display(100, quantity=quantity)

    assert display.in_stock is False
    assert display.stock_label == "Out of Stock"
    assert display.stock_color == "error"


def test_hidden_tax():
    display = build_price_display(100, tax_rate=10, show_tax=False)

    assert not any("Tax" in text for text in display.texts())
    assert display.tax_amount == 0
    assert display.get_line("final") == "Final Price: $100.00"


def test_no_discount_section_without_discount():
    display = build_price_display(100, discount_percentage=0)

    assert not any("Discount" in text for text in display.texts())


def test_complex_calculation():
    display = build_price_display(
        199.99, discount_percentage=25, tax_rate=8.5, quantity=3, show_tax=True
    )

    assert display.get_line("original") == "Original Price: $199.99"
    assert display.get_line("discount") == "Discount (25%): -$50.00"
    assert display.get_line("discounted") == "Discounted Price: $149.99"
    assert display.get_line("tax") == "Tax (8.5%): $12.75"
    assert display.get_line("final") == "Final Price: $162.74"
    assert display.stock_label == "In Stock (3)"
    assert display.final_price == pytest.approx(162.7418625)


def test_fractional_quantity_label():
    assert build_price_display(10, quantity=0.5).stock_label == "In Stock (0.5)"


@pytest.mark.parametrize("kwargs, message", [
    ({"original_price": -1}, "Original price cannot be negative"),
    ({"original_price": 100, "discount_percentage": 120}, "Discount percentage must be between 0 and 100"),
    ({"original_price": 100, "tax_rate": -2}, "Tax rate cannot be negative"),
])
def test_invalid_inputs_are_not_rendered(kwargs, message):
    with pytest.raises(InvalidArgument, match=message):
        build_price_display(**kwargs)


def test_negative_tax_rate_ignored_when_tax_hidden():
    display = build_price_display(100, tax_rate=-2, show_tax=False)
    assert display.get_line("final") == "Final Price: $100.00"


def test_custom_currency():
    euro = CurrencyFormat(symbol="€", thousands_separator=".", decimal_separator=",")
    display = build_price_display(1500, discount_percentage=10, currency=euro)

    assert display.get_line("discount") == "Discount (10%): -€150,00"
    assert display.get_line("final") == "Final Price: €1.350,00"


def test_trace_and_export():
    display = build_price_display(100, discount_percentage=20, tax_rate=10)

    trace = display.get_trace_text()
    assert "→ Discount: 20% off $100.00 = $80.00" in trace
    assert "→ Final: $80.00 + $8.00 = $88.00" in trace

    row = display.to_dict()
    assert row["Discounted Price"] == 80
    assert row["Final Price"] == 88
    assert row["In Stock"] is True


def test_very_large_price():
    display = build_price_display(1e27)

    assert display.get_line("original") == "Original Price: $1,000,000,000,000,000,000,000,000,000.00"
    assert display.get_line("final") == "Final Price: $1,000,000,000,000,000,000,000,000,000.00"
