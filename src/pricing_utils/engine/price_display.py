"""
Price Display - derives everything the price panel shows from raw inputs.

Resolution order:
1. Discount the original price
2. Tax the discounted price (only when tax is shown)
3. Final price = discounted price + tax
4. Stock badge from the quantity on hand

Calculator errors (InvalidArgument) are not caught here; callers treat
them as "do not render this panel".
"""
from typing import Optional

from .models import CurrencyFormat, PriceDisplay
from .utils import (
    calculate_discounted_price,
    calculate_tax,
    default_currency,
    format_as_price,
    is_in_stock,
)


def _plain_number(value: float) -> str:
    """20.0 -> "20", 8.5 -> "8.5"."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def build_price_display(
    original_price: float,
    discount_percentage: float = 0,
    tax_rate: float = 0,
    quantity: float = 1,
    show_tax: bool = True,
    currency: Optional[CurrencyFormat] = None,
) -> PriceDisplay:
    """
    Build the price panel for a single product.

    Args:
        original_price: List price before discount
        discount_percentage: Discount between 0 and 100
        tax_rate: Tax rate as a percentage
        quantity: Units on hand, drives the stock badge
        show_tax: Whether tax is charged and shown
        currency: Optional currency format override

    Returns:
        PriceDisplay with derived amounts, rendered lines and trace
    """
    currency = currency or default_currency()

    def price(amount: float) -> str:
        return format_as_price(amount, currency)

    discounted_price = calculate_discounted_price(original_price, discount_percentage)
    tax_amount = calculate_tax(discounted_price, tax_rate) if show_tax else 0.0
    final_price = discounted_price + tax_amount
    in_stock = is_in_stock(quantity)

    display = PriceDisplay(
        original_price=original_price,
        discount_percentage=discount_percentage,
        tax_rate=tax_rate,
        quantity=quantity,
        show_tax=show_tax,
        discounted_price=discounted_price,
        tax_amount=tax_amount,
        final_price=final_price,
        in_stock=in_stock,
    )

    display.add_trace("Original", "List price", price(original_price))
    display.add_line("original", f"Original Price: {price(original_price)}")

    if discount_percentage > 0:
        pct = _plain_number(discount_percentage)
        display.add_line("discount", f"Discount ({pct}%): -{price(display.discount_amount)}", "primary")
        display.add_line("discounted", f"Discounted Price: {price(discounted_price)}")
        display.add_trace("Discount", f"{pct}% off {price(original_price)}", price(discounted_price))
    else:
        display.add_trace("Discount", "No discount")

    if show_tax and tax_rate > 0:
        pct = _plain_number(tax_rate)
        display.add_line("tax", f"Tax ({pct}%): {price(tax_amount)}")
        display.add_trace("Tax", f"{pct}% of {price(discounted_price)}", price(tax_amount))
    elif not show_tax:
        display.add_trace("Tax", "Tax hidden")
    else:
        display.add_trace("Tax", "No tax")

    display.add_line("final", f"Final Price: {price(final_price)}", "secondary")
    display.add_trace("Final", f"{price(discounted_price)} + {price(tax_amount)}", price(final_price))

    if in_stock:
        display.stock_label = f"In Stock ({_plain_number(quantity)})"
        display.stock_color = "success"
    else:
        display.stock_label = "Out of Stock"
        display.stock_color = "error"
    display.add_trace("Stock", f"Quantity {_plain_number(quantity)}", display.stock_label)

    return display
