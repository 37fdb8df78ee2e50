from collections.abc import Iterable

import httpx

from domain.exceptions.currency import ProviderError
from domain.models.currency import ALL_SUPPORTED_CURRENCIES
from infrastructure.providers.base import filter_supported


class ExchangeRateAPIProvider:
	"""Keyless daily rates from exchangerate-api.com."""

	BASE_URL = 'https://api.exchangerate-api.com/v4'

	def __init__(
		self,
		base_url: str | None = None,
		client: httpx.AsyncClient | None = None,
		timeout: int = 10,
	):
		self.base_url = (base_url or self.BASE_URL).rstrip('/')
		self._client = client or httpx.AsyncClient(timeout=timeout)

	@property
	def name(self) -> str:
		return 'exchangerate-api'

	async def _request(self, endpoint: str) -> dict:
		url = f'{self.base_url}/{endpoint}'

		try:
			response = await self._client.get(url)
			response.raise_for_status()
			data = response.json()

			if data.get('result') == 'error':
				raise ProviderError(
					f"ExchangeRate-API error: {data.get('error-type', 'Unknown error')}"
				)

			return data

		except ProviderError:
			raise
		except httpx.HTTPStatusError as e:
			raise ProviderError(
				f'ExchangeRate-API HTTP error {e.response.status_code}: {e.response.text[:200]}'
			) from e
		except httpx.RequestError as e:
			raise ProviderError(f'ExchangeRate-API request failed: {e.__class__.__name__}') from e
		except Exception as e:
			raise ProviderError(f'ExchangeRate-API response parsing error: {str(e)}') from e

	async def fetch_usd_rates(
		self, currencies: Iterable[str] = ALL_SUPPORTED_CURRENCIES
	) -> dict[str, float]:
		data = await self._request('latest/USD')
		try:
			rates = filter_supported(data['rates'], currencies)
		except (KeyError, TypeError, AttributeError) as e:
			raise ProviderError('ExchangeRate-API response has no rates') from e

		if 'USD' not in rates:
			raise ProviderError('Missing rate for USD')
		return rates

	async def close(self) -> None:
		await self._client.aclose()
