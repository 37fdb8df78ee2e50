from collections.abc import Iterable
from typing import Protocol, runtime_checkable


@runtime_checkable
class ExchangeRateProvider(Protocol):
    """A source of USD-quoted rates: units of each currency per 1 USD."""

    @property
    def name(self) -> str:
        ...

    async def fetch_usd_rates(self, currencies: Iterable[str]) -> dict[str, float]:
        ...

    async def close(self) -> None:
        ...


def filter_supported(rates: dict, currencies: Iterable[str]) -> dict[str, float]:
    filtered = {}
    for code in currencies:
        value = rates.get(code)
        if value:
            filtered[code] = float(value)
    return filtered
