"""
Pricing Utilities - pure helpers for prices, shipping, loyalty and display text.

Every function is independent and stateless. Precondition violations raise
InvalidArgument; input that simply does not apply (a non-string name, an
unparseable phone number) returns a sentinel instead.
"""
import logging
import math
import random
import re
import time
from datetime import date, datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Callable, Optional, Union

from ..config.settings import get_settings
from .models import (
    CurrencyFormat,
    CustomerTier,
    InvalidArgument,
    ShippingPolicy,
    TIER_MULTIPLIERS,
)


logger = logging.getLogger(__name__)

# Shipping rate cards
STRICT_BASE_RATE = 5.0       # flat charge per shipment
STRICT_WEIGHT_RATE = 0.5     # per kg
STRICT_DISTANCE_RATE = 0.1   # per km
LENIENT_WEIGHT_RATE = 0.5    # per lb
LENIENT_DISTANCE_RATE = 0.001  # per mile
LENIENT_EXPEDITED_FACTOR = 2
MINIMUM_SHIPPING_COST = 5.0

# Delivery lead times in calendar days
STANDARD_DELIVERY_DAYS = 5
EXPEDITED_DELIVERY_DAYS = 2

# Loyalty bonuses
FIRST_PURCHASE_BONUS = 50
LARGE_PURCHASE_BONUS = 100
LARGE_PURCHASE_THRESHOLD = 500

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

_NON_DIGITS = re.compile(r"\D")


def default_currency() -> CurrencyFormat:
    """Build a currency format from the current settings."""
    return CurrencyFormat(symbol=get_settings().currency_symbol)


def format_as_price(amount: float, currency: Optional[CurrencyFormat] = None) -> str:
    """
    Format an amount as currency text, e.g. 1234.5 -> "$1,234.50".

    Rounds half away from zero at the last displayed digit and renders
    negative amounts with a leading minus ("-$5.00").
    """
    currency = currency or default_currency()
    value = Decimal(str(amount))
    quantum = Decimal(1).scaleb(-currency.decimals)

    # Default precision (28 digits) cannot hold amounts of 1e26 and up at cent scale
    with localcontext() as ctx:
        ctx.prec = max(28, value.adjusted() + currency.decimals + 2)
        rounded = value.quantize(quantum, rounding=ROUND_HALF_UP)
        sign = "-" if rounded < 0 else ""
        digits = f"{abs(rounded):,.{currency.decimals}f}"

    # Swap separators through a placeholder so "," and "." can trade places
    digits = (
        digits.replace(",", "\x00")
        .replace(".", currency.decimal_separator)
        .replace("\x00", currency.thousands_separator)
    )
    return f"{sign}{currency.symbol}{digits}"


def calculate_discounted_price(original_price: float, discount_percentage: float) -> float:
    """
    Apply a percentage discount to a price.

    Args:
        original_price: Price before discount, must not be negative
        discount_percentage: Discount between 0 and 100 inclusive

    Returns:
        The discounted price
    """
    if original_price < 0:
        raise InvalidArgument("Original price cannot be negative")
    if discount_percentage < 0 or discount_percentage > 100:
        raise InvalidArgument("Discount percentage must be between 0 and 100")

    discount_amount = (original_price * discount_percentage) / 100
    return original_price - discount_amount


def calculate_tax(price: float, tax_rate: float) -> float:
    """
    Tax owed on a price.

    Args:
        price: Price before tax, must not be negative
        tax_rate: Tax rate as a percentage; no upper bound

    Returns:
        The tax amount (not the taxed total)
    """
    if price < 0:
        raise InvalidArgument("Price cannot be negative")
    if tax_rate < 0:
        raise InvalidArgument("Tax rate cannot be negative")

    return (price * tax_rate) / 100


def format_product_name(name) -> str:
    """Title-case a product name and normalize its whitespace."""
    if not name or not isinstance(name, str):
        return ""

    collapsed = " ".join(name.split()).lower()
    if not collapsed:
        return ""
    return " ".join(word[:1].upper() + word[1:] for word in collapsed.split(" "))


def _epoch_millis() -> int:
    return int(time.time() * 1000)


def generate_product_id(
    prefix: str = "prod",
    clock: Optional[Callable[[], int]] = None,
    rng=None,
) -> str:
    """
    Generate a product ID like "prod-1700000000000-42".

    Uniqueness is probabilistic only. Pass ``clock`` (epoch milliseconds)
    and ``rng`` (anything with ``randint``) for deterministic output.
    """
    clock = clock or _epoch_millis
    rng = rng or random
    return f"{prefix}-{clock()}-{rng.randint(0, 999)}"


def generate_order_id(
    prefix: str = "ORD",
    clock: Optional[Callable[[], int]] = None,
    rng=None,
) -> str:
    """Generate an order ID like "ORD-1700000000000-042" (suffix zero-padded)."""
    clock = clock or _epoch_millis
    rng = rng or random
    return f"{prefix}-{clock()}-{rng.randint(0, 999):03d}"


def is_in_stock(quantity: float) -> bool:
    """True for any strictly positive quantity."""
    return quantity > 0


def calculate_shipping_cost(
    weight: float,
    distance: float,
    expedited: bool = False,
    policy: Union[ShippingPolicy, str, None] = None,
) -> float:
    """
    Estimate the shipping cost of a parcel.

    Lenient policy (default): non-positive weight or distance costs 0;
    otherwise weight * 0.5 + distance * 0.001, doubled when expedited,
    never less than 5.

    Strict policy: non-positive weight or distance raises InvalidArgument;
    otherwise 5 + weight * 0.5 + distance * 0.1. ``expedited`` is ignored.
    """
    policy = policy or get_settings().shipping_policy
    try:
        policy = ShippingPolicy(policy.lower())
    except (AttributeError, ValueError):
        raise InvalidArgument(f"Unknown shipping policy: {policy!r}") from None

    if policy is ShippingPolicy.STRICT:
        if weight <= 0 or distance <= 0:
            logger.debug("Rejected shipping quote: weight=%s distance=%s", weight, distance)
            raise InvalidArgument("Weight and distance must be positive numbers")
        return STRICT_BASE_RATE + (weight * STRICT_WEIGHT_RATE) + (distance * STRICT_DISTANCE_RATE)

    if weight <= 0 or distance <= 0:
        return 0.0

    cost = (weight * LENIENT_WEIGHT_RATE) + (distance * LENIENT_DISTANCE_RATE)
    if expedited:
        cost *= LENIENT_EXPEDITED_FACTOR
    return max(cost, MINIMUM_SHIPPING_COST)


def calculate_delivery_date(order_date: date, expedited: bool = False) -> date:
    """
    Project the delivery date for an order.

    Adds 5 calendar days (2 when expedited) and, if that lands on a
    weekend, moves forward to the following Monday. Weekends inside the
    window are not skipped. Returns the same type that was passed in.
    """
    days = EXPEDITED_DELIVERY_DAYS if expedited else STANDARD_DELIVERY_DAYS
    delivery = order_date + timedelta(days=days)
    while delivery.weekday() >= 5:  # Saturday=5, Sunday=6
        delivery += timedelta(days=1)
    return delivery


def format_date(d: Union[date, datetime, str]) -> str:
    """Format a date as "June 15, 2023" regardless of process locale."""
    if isinstance(d, str):
        d = datetime.fromisoformat(d)
    return f"{MONTH_NAMES[d.month - 1]} {d.day}, {d.year}"


def calculate_loyalty_points(
    purchase_amount: float,
    tier: Union[CustomerTier, str] = CustomerTier.BRONZE,
    is_first_purchase: bool = False,
) -> int:
    """
    Loyalty points earned for a purchase.

    Whole currency units are multiplied by the tier multiplier, then a
    first-purchase bonus (+50) and a large-purchase bonus (+100 at 500
    and above) are added. Non-positive purchases earn nothing.
    """
    if purchase_amount <= 0:
        return 0

    tier = CustomerTier.coerce(tier)
    points = math.floor(purchase_amount) * TIER_MULTIPLIERS[tier]

    if is_first_purchase:
        points += FIRST_PURCHASE_BONUS
    if purchase_amount >= LARGE_PURCHASE_THRESHOLD:
        points += LARGE_PURCHASE_BONUS

    return math.floor(points)


def format_phone_number(value) -> Optional[str]:
    """
    Normalize a US phone number.

    "1234567890" -> "(123) 456-7890", "1-123-456-7890" -> "+1 (123) 456-7890".
    Returns None when the input is empty or does not hold a valid US number.
    """
    if not value or not isinstance(value, str):
        return None

    digits = _NON_DIGITS.sub("", value)

    if len(digits) == 11 and digits.startswith("1"):
        digits = digits[1:]
        country = "+1 "
    elif len(digits) == 10:
        country = ""
    else:
        return None

    return f"{country}({digits[:3]}) {digits[3:6]}-{digits[6:]}"
