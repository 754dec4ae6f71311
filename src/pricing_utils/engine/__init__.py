"""Engine subpackage - pricing utilities and the price display."""
from .models import (
    CurrencyFormat,
    CustomerTier,
    InvalidArgument,
    PriceDisplay,
    ShippingPolicy,
    TIER_MULTIPLIERS,
    USD,
)
from .utils import (
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
from .price_display import build_price_display

__all__ = [
    'CurrencyFormat', 'CustomerTier', 'InvalidArgument', 'PriceDisplay',
    'ShippingPolicy', 'TIER_MULTIPLIERS', 'USD',
    'build_price_display', 'calculate_delivery_date', 'calculate_discounted_price',
    'calculate_loyalty_points', 'calculate_shipping_cost', 'calculate_tax',
    'format_as_price', 'format_date', 'format_phone_number', 'format_product_name',
    'generate_order_id', 'generate_product_id', 'is_in_stock',
]
