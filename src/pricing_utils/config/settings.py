"""
Centralized settings for the pricing utilities.

Values come from environment variables with sensible defaults so the
Streamlit page and the library agree on currency and shipping policy.
"""
import logging
import os
from dataclasses import dataclass
from typing import Optional


logger = logging.getLogger(__name__)

SHIPPING_POLICIES = ('lenient', 'strict')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class Settings:
    """Application settings with sensible defaults."""

    # Currency display
    currency_symbol: str = '$'

    # "lenient" (returns 0 for bad input, expedited-aware) or "strict" (raises)
    shipping_policy: str = 'lenient'

    log_level: str = 'INFO'

    # Active loyalty tiers, lowest first
    active_tiers: tuple = ('bronze', 'silver', 'gold', 'platinum')

    @classmethod
    def load(cls, environ: Optional[dict] = None) -> 'Settings':
        """Load settings from the environment."""
        env = os.environ if environ is None else environ

        policy = env.get('PRICING_SHIPPING_POLICY', 'lenient').strip().lower()
        if policy not in SHIPPING_POLICIES:
            logger.warning("Unknown PRICING_SHIPPING_POLICY %r, using 'lenient'", policy)
            policy = 'lenient'

        level = env.get('PRICING_LOG_LEVEL', 'INFO').strip().upper()
        if level not in LOG_LEVELS:
            logger.warning("Unknown PRICING_LOG_LEVEL %r, using 'INFO'", level)
            level = 'INFO'

        return cls(
            currency_symbol=env.get('PRICING_CURRENCY_SYMBOL', '$') or '$',
            shipping_policy=policy,
            log_level=level,
        )


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reset_settings():
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
