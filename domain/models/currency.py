from dataclasses import dataclass
from datetime import datetime

ALL_SUPPORTED_CURRENCIES: tuple[str, ...] = (
    "USD", "EUR", "GBP", "JPY", "INR", "AUD", "CAD", "CHF", "CNY", "SGD", "AED",
)

# Smaller than the supported set; only these are tried as the middle leg of a route
MULTI_HOP_INTERMEDIARY_CURRENCIES: tuple[str, ...] = ("USD", "EUR", "GBP", "JPY", "INR")

CURRENCY_SYMBOLS: dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "INR": "₹",
    "AUD": "A$",
    "CAD": "C$",
    "CHF": "CHF ",
    "CNY": "¥",
    "SGD": "S$",
    "AED": "د.إ",
}


def format_currency(amount: float, currency: str) -> str:
    symbol = CURRENCY_SYMBOLS.get(currency, currency)
    return f"{symbol}{amount:,.2f}"


@dataclass(frozen=True)
class RateSnapshot:
    rates: dict[str, float]  # units of currency per 1 USD
    timestamp: datetime
    source: str

    def has_usd_anchor(self) -> bool:
        return bool(self.rates) and "USD" in self.rates
