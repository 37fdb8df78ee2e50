from collections.abc import Iterable, Mapping
from types import MappingProxyType

from domain.models.currency import ALL_SUPPORTED_CURRENCIES

# Hand-curated approximations used until the first live snapshot arrives.
# Rows are not cross-consistent with each other.
SEED_RATES: dict[str, dict[str, float]] = {
    "USD": {"EUR": 0.92, "GBP": 0.79, "JPY": 149.50, "INR": 83.12, "AUD": 1.53, "CAD": 1.36, "CHF": 0.88, "CNY": 7.24, "SGD": 1.34, "AED": 3.67, "USD": 1},
    "EUR": {"USD": 1.09, "GBP": 0.86, "JPY": 162.45, "INR": 90.35, "AUD": 1.66, "CAD": 1.48, "CHF": 0.96, "CNY": 7.87, "SGD": 1.46, "AED": 3.99, "EUR": 1},
    "GBP": {"USD": 1.27, "EUR": 1.16, "JPY": 189.23, "INR": 105.18, "AUD": 1.93, "CAD": 1.72, "CHF": 1.11, "CNY": 9.16, "SGD": 1.70, "AED": 4.64, "GBP": 1},
    "JPY": {"USD": 0.0067, "EUR": 0.0062, "GBP": 0.0053, "INR": 0.556, "AUD": 0.010, "CAD": 0.0091, "CHF": 0.0059, "CNY": 0.048, "SGD": 0.009, "AED": 0.025, "JPY": 1},
    "INR": {"USD": 0.012, "EUR": 0.011, "GBP": 0.0095, "JPY": 1.80, "AUD": 0.018, "CAD": 0.016, "CHF": 0.011, "CNY": 0.087, "SGD": 0.016, "AED": 0.044, "INR": 1},
    "AUD": {"USD": 0.65, "EUR": 0.60, "GBP": 0.52, "JPY": 97.71, "INR": 54.32, "CAD": 0.89, "CHF": 0.58, "CNY": 4.73, "SGD": 0.88, "AED": 2.40, "AUD": 1},
    "CAD": {"USD": 0.74, "EUR": 0.68, "GBP": 0.58, "JPY": 109.93, "INR": 61.12, "AUD": 1.13, "CHF": 0.65, "CNY": 5.32, "SGD": 0.99, "AED": 2.70, "CAD": 1},
    "CHF": {"USD": 1.14, "EUR": 1.04, "GBP": 0.90, "JPY": 169.89, "INR": 94.45, "AUD": 1.74, "CAD": 1.55, "CNY": 8.23, "SGD": 1.53, "AED": 4.17, "CHF": 1},
    "CNY": {"USD": 0.14, "EUR": 0.13, "GBP": 0.11, "JPY": 20.65, "INR": 11.48, "AUD": 0.21, "CAD": 0.19, "CHF": 0.12, "SGD": 0.19, "AED": 0.51, "CNY": 1},
    "SGD": {"USD": 0.75, "EUR": 0.69, "GBP": 0.59, "JPY": 111.94, "INR": 62.24, "AUD": 1.14, "CAD": 1.02, "CHF": 0.66, "CNY": 5.43, "AED": 2.75, "SGD": 1},
    "AED": {"USD": 0.27, "EUR": 0.25, "GBP": 0.22, "JPY": 40.74, "INR": 22.65, "AUD": 0.42, "CAD": 0.37, "CHF": 0.24, "CNY": 1.97, "SGD": 0.36, "AED": 1},
}


class RateTable:
    """
    Immutable cross-rate matrix: rate(A, B) is how many units of B one unit of A buys.

    A refresh never edits a table in place. It builds a new one from a single
    USD-quoted snapshot, so holders of the old reference keep a consistent view.
    """

    def __init__(self, rates: Mapping[str, Mapping[str, float]]):
        matrix = {
            base: MappingProxyType({quote: float(value) for quote, value in row.items()})
            for base, row in rates.items()
        }
        for code, row in matrix.items():
            if row.get(code) != 1:
                matrix[code] = MappingProxyType({**row, code: 1.0})
        self._rates = MappingProxyType(matrix)

    @classmethod
    def seed(cls) -> "RateTable":
        return cls(SEED_RATES)

    @classmethod
    def from_usd_snapshot(
        cls,
        usd_rates: Mapping[str, float] | None,
        currencies: Iterable[str] = ALL_SUPPORTED_CURRENCIES,
    ) -> "RateTable | None":
        """Derive every cross rate from one USD anchor. Returns None for an unusable snapshot."""
        usd_anchor = usd_rates.get("USD") if usd_rates else None
        if not usd_anchor or usd_anchor <= 0:
            return None

        def anchor(code: str) -> float:
            # A missing or non-positive quote is treated as parity with USD
            value = usd_rates.get(code)
            return float(value) if value and value > 0 else 1.0

        codes = list(currencies)
        rates = {
            base: {
                quote: 1.0 if base == quote else (1 / anchor(base)) * anchor(quote)
                for quote in codes
            }
            for base in codes
        }
        return cls(rates)

    @property
    def currencies(self) -> list[str]:
        return list(self._rates)

    def rate(self, from_currency: str, to_currency: str) -> float:
        value = self._rates.get(from_currency, {}).get(to_currency)
        if not value or value <= 0:
            return 1.0
        return value

    def convert(self, amount: float, from_currency: str, to_currency: str) -> float:
        if from_currency == to_currency:
            return amount
        return amount * self.rate(from_currency, to_currency)

    def rebuild_from_usd_snapshot(self, usd_rates: Mapping[str, float] | None) -> "RateTable":
        rebuilt = RateTable.from_usd_snapshot(usd_rates, self.currencies)
        return rebuilt if rebuilt is not None else self

    def row(self, base: str) -> dict[str, float]:
        return dict(self._rates.get(base, {}))

    def as_dict(self) -> dict[str, dict[str, float]]:
        return {base: dict(row) for base, row in self._rates.items()}


def convert(table: RateTable, amount: float, from_currency: str, to_currency: str) -> float:
    return table.convert(amount, from_currency, to_currency)


def rebuild_rate_table(table: RateTable, usd_snapshot: Mapping[str, float] | None) -> RateTable:
    return table.rebuild_from_usd_snapshot(usd_snapshot)
