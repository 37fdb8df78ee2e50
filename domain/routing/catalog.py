from collections.abc import Mapping

from domain.exceptions.currency import UnknownProviderError
from domain.models.route import Provider

PAYMENT_PROVIDERS: dict[str, Provider] = {
    provider.name: provider
    for provider in (
        Provider("Wise", 0.5, "1-2 days", 98),
        Provider("SWIFT", 2.0, "3-5 days", 95),
        Provider("Remitly", 0.8, "1-3 days", 94),
        Provider("Western Union", 1.5, "Same day", 92),
        Provider("OFX", 0.4, "1-2 days", 96),
        Provider("XE", 0.6, "1-3 days", 97),
        Provider("Crypto Bridge", 0.3, "10 mins", 88),
    )
}

# Keyed "FROM-TO"; direction matters
CORRIDOR_FEES: dict[str, float] = {
    "USD-EUR": -0.1, "USD-GBP": -0.1, "USD-INR": 0.3, "USD-JPY": 0.2,
    "EUR-USD": -0.1, "EUR-GBP": -0.05, "EUR-INR": 0.4, "EUR-JPY": 0.3,
    "GBP-USD": -0.1, "GBP-EUR": -0.05, "GBP-INR": 0.3, "GBP-JPY": 0.25,
    "JPY-USD": 0.2, "JPY-EUR": 0.25, "JPY-GBP": 0.25, "JPY-INR": 0.5,
    "INR-USD": 0.5, "INR-EUR": 0.6, "INR-GBP": 0.5, "INR-JPY": 0.7,
}

MIN_FEE_PERCENT = 0.1

# Only these providers may carry either leg of a two-hop route
MULTI_HOP_ELIGIBLE_PROVIDERS: tuple[str, ...] = ("Wise", "OFX", "XE")


def corridor_key(from_currency: str, to_currency: str) -> str:
    return f"{from_currency}-{to_currency}"


def get_provider(name: str, providers: Mapping[str, Provider] = PAYMENT_PROVIDERS) -> Provider:
    try:
        return providers[name]
    except KeyError as e:
        raise UnknownProviderError(f"Provider {name} is not in the catalog") from e


def effective_fee(
    provider: Provider,
    from_currency: str,
    to_currency: str,
    corridor_fees: Mapping[str, float] = CORRIDOR_FEES,
) -> float:
    """Fee percent for one provider on one corridor, never below MIN_FEE_PERCENT."""
    adjustment = corridor_fees.get(corridor_key(from_currency, to_currency), 0.0)
    return max(MIN_FEE_PERCENT, provider.base_fee_percent + adjustment)
