"""
Pricing Utilities Package

Stateless pricing and formatting helpers for storefront displays:
discounts, tax, shipping, delivery dates, loyalty points and
customer-facing text (prices, product names, phone numbers, dates).
"""

__version__ = "1.0.0"

from .engine import (
    CustomerTier,
    CurrencyFormat,
    InvalidArgument,
    PriceDisplay,
    ShippingPolicy,
    build_price_display,
    calculate_delivery_date,
    calculate_discounted_price,
    calculate_loyalty_points,
    calculate_shipping_cost,
    calculate_tax,
    format_as_price,
    format_date,
    format_phone_number,
    format_product_name,
    generate_order_id,
    generate_product_id,
    is_in_stock,
)
