from collections.abc import Iterable

import httpx

from domain.exceptions.currency import ProviderError
from domain.models.currency import ALL_SUPPORTED_CURRENCIES
from infrastructure.providers.base import filter_supported


class OpenExchangeProvider:
    BASE_URL = "https://openexchangerates.org/api"

    def __init__(self, app_id: str, client: httpx.AsyncClient | None = None, timeout: int = 10):
        self.app_id = app_id
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @property
    def name(self) -> str:
        return "openexchange"

    async def _request(self, endpoint: str, params: dict) -> dict:
        params["app_id"] = self.app_id
        url = f"{self.BASE_URL}/{endpoint}"

        try:
            response = await self._client.get(url, params=params)
            response.raise_for_status()
            data = response.json()

            if "error" in data:
                message = data.get("description", data.get("message", "Unknown error"))
                raise ProviderError(f"OpenExchange API error: {message}")

            return data

        except ProviderError:
            raise
        except httpx.HTTPStatusError as e:
            raise ProviderError(
                f"OpenExchange HTTP error {e.response.status_code}: {e.response.text[:200]}"
            ) from e
        except httpx.RequestError as e:
            raise ProviderError(f"OpenExchange request failed: {e.__class__.__name__}") from e
        except Exception as e:
            raise ProviderError(f"OpenExchange response parsing error: {str(e)}") from e

    async def fetch_usd_rates(
        self, currencies: Iterable[str] = ALL_SUPPORTED_CURRENCIES
    ) -> dict[str, float]:
        codes = list(currencies)
        data = await self._request("latest.json", {"base": "USD", "symbols": ",".join(codes)})
        try:
            rates = filter_supported(data["rates"], codes)
        except (KeyError, TypeError, AttributeError) as e:
            raise ProviderError("OpenExchange response has no rates") from e

        # The base currency is implied by the request but not always echoed back
        rates.setdefault("USD", 1.0)
        return rates

    async def close(self) -> None:
        await self._client.aclose()
