# nosec B101


import pytest
from unittest.mock import Mock, AsyncMock
import httpx

from infrastructure.providers.exchangerate_api import ExchangeRateAPIProvider
from domain.exceptions.currency import ProviderError


def _client_returning(payload: dict) -> AsyncMock:
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_response = Mock()
    mock_response.json.return_value = payload
    mock_response.raise_for_status = Mock()
    mock_client.get.return_value = mock_response
    return mock_client


@pytest.mark.asyncio
async def test_fetch_usd_rates_success_filters_supported_currencies():
    mock_client = _client_returning({
        'base': 'USD',
        'date': '2025-11-05',
        'rates': {'USD': 1, 'EUR': 0.85, 'GBP': 0.74, 'NGN': 1460.2, 'BTC': 0.00001}
    })
    provider = ExchangeRateAPIProvider(client=mock_client)

    rates = await provider.fetch_usd_rates(['USD', 'EUR', 'GBP'])

    assert rates == {'USD': 1.0, 'EUR': 0.85, 'GBP': 0.74}
    assert all(isinstance(v, float) for v in rates.values())
    mock_client.get.assert_called_once()
    assert mock_client.get.call_args[0][0] == 'https://api.exchangerate-api.com/v4/latest/USD'


@pytest.mark.asyncio
async def test_fetch_usd_rates_custom_base_url():
    mock_client = _client_returning({'rates': {'USD': 1, 'EUR': 0.85}})
    provider = ExchangeRateAPIProvider(base_url='http://rates.local/v4/', client=mock_client)

    await provider.fetch_usd_rates()

    assert mock_client.get.call_args[0][0] == 'http://rates.local/v4/latest/USD'


@pytest.mark.asyncio
async def test_fetch_usd_rates_skips_missing_currencies():
    mock_client = _client_returning({'rates': {'USD': 1, 'EUR': 0.85}})
    provider = ExchangeRateAPIProvider(client=mock_client)

    rates = await provider.fetch_usd_rates()

    assert rates == {'USD': 1.0, 'EUR': 0.85}


@pytest.mark.asyncio
async def test_fetch_usd_rates_api_returns_error():
    mock_client = _client_returning({'result': 'error', 'error-type': 'unsupported-code'})
    provider = ExchangeRateAPIProvider(client=mock_client)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_usd_rates()

    assert 'unsupported-code' in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_usd_rates_missing_rates_key():
    mock_client = _client_returning({'base': 'USD'})
    provider = ExchangeRateAPIProvider(client=mock_client)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_usd_rates()

    assert 'no rates' in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_usd_rates_without_usd_anchor():
    mock_client = _client_returning({'rates': {'EUR': 0.85}})
    provider = ExchangeRateAPIProvider(client=mock_client)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_usd_rates()

    assert 'Missing rate for USD' in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_usd_rates_http_500_error():
    mock_client = AsyncMock(spec=httpx.AsyncClient)

    error_response = Mock()
    error_response.status_code = 500
    error_response.text = 'Internal Server Error'

    mock_client.get.side_effect = httpx.HTTPStatusError(
        'Server error',
        request=Mock(),
        response=error_response
    )

    provider = ExchangeRateAPIProvider(client=mock_client)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_usd_rates()

    assert 'HTTP error 500' in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_usd_rates_network_timeout():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.side_effect = httpx.TimeoutException('Request timed out')
    provider = ExchangeRateAPIProvider(client=mock_client)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_usd_rates()

    assert 'request failed' in str(exc_info.value).lower()


@pytest.mark.asyncio
async def test_fetch_usd_rates_invalid_json_response():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_response = Mock()
    mock_response.raise_for_status = Mock()
    mock_response.json.side_effect = ValueError('Invalid JSON')
    mock_client.get.return_value = mock_response

    provider = ExchangeRateAPIProvider(client=mock_client)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch_usd_rates()

    assert 'parsing error' in str(exc_info.value).lower()


@pytest.mark.asyncio
async def test_close_closes_client():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    provider = ExchangeRateAPIProvider(client=mock_client)

    await provider.close()

    mock_client.aclose.assert_awaited_once()
