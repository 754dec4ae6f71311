"""
Data models for the pricing utilities.

Uses dataclasses and enums for the small closed sets (tiers, shipping
policies) and for the price display view model.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class InvalidArgument(ValueError):
    """Raised when an input violates a calculator precondition."""


class CustomerTier(str, Enum):
    """Customer loyalty tier."""
    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    PLATINUM = "platinum"

    @classmethod
    def coerce(cls, value) -> 'CustomerTier':
        """Accept a tier or its name in any case."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidArgument(f"Unknown customer tier: {value!r}") from None


# Points earned per whole currency unit spent
TIER_MULTIPLIERS = {
    CustomerTier.BRONZE: 1,
    CustomerTier.SILVER: 1.5,
    CustomerTier.GOLD: 2,
    CustomerTier.PLATINUM: 3,
}


class ShippingPolicy(str, Enum):
    """How shipping cost treats invalid input and which rate card applies."""
    LENIENT = "lenient"  # 0 for bad input, expedited doubling, $5 floor
    STRICT = "strict"    # raises, flat $5 base rate


@dataclass(frozen=True)
class CurrencyFormat:
    """Display conventions for a currency amount."""
    symbol: str = "$"
    thousands_separator: str = ","
    decimal_separator: str = "."
    decimals: int = 2


USD = CurrencyFormat()


@dataclass
class TraceStep:
    """A single step in a price display calculation."""
    step: str
    description: str
    value: Optional[str] = None


@dataclass
class DisplayLine:
    """One rendered line of the price display."""
    key: str  # "original", "discount", "discounted", "tax", "final"
    text: str
    emphasis: Optional[str] = None  # "primary", "secondary" or None


@dataclass
class PriceDisplay:
    """Derived values and rendered text for a single price."""
    original_price: float
    discount_percentage: float
    tax_rate: float
    quantity: float
    show_tax: bool
    discounted_price: float
    tax_amount: float
    final_price: float
    in_stock: bool
    title: str = "Price Information"
    lines: list[DisplayLine] = field(default_factory=list)
    stock_label: str = ""
    stock_color: str = ""  # "success" or "error"
    trace: list[TraceStep] = field(default_factory=list)

    @property
    def discount_amount(self) -> float:
        return self.original_price - self.discounted_price

    def add_line(self, key: str, text: str, emphasis: str = None):
        """Append a rendered line."""
        self.lines.append(DisplayLine(key=key, text=text, emphasis=emphasis))

    def add_trace(self, step: str, description: str, value: str = None):
        """Add a step to the calculation trace."""
        self.trace.append(TraceStep(step=step, description=description, value=value))

    def get_line(self, key: str) -> Optional[str]:
        """Text of the line with the given key, or None if not shown."""
        for line in self.lines:
            if line.key == key:
                return line.text
        return None

    def texts(self) -> list[str]:
        """All visible text, title and stock badge included."""
        return [self.title] + [line.text for line in self.lines] + [self.stock_label]

    def get_trace_text(self) -> str:
        """Get human-readable trace as formatted text."""
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"→ {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"→ {t.step}: {t.description}")
        return "\n".join(lines)

    def to_dict(self) -> dict:
        """Plain dict of the derived values, for tables and exports."""
        return {
            "Original Price": self.original_price,
            "Discount %": self.discount_percentage,
            "Discounted Price": self.discounted_price,
            "Tax %": self.tax_rate,
            "Tax": self.tax_amount,
            "Final Price": self.final_price,
            "Quantity": self.quantity,
            "In Stock": self.in_stock,
        }
