# nosec B101


import pytest
import json
from datetime import datetime, timedelta
from unittest.mock import AsyncMock


from infrastructure.cache.redis_cache import RedisCacheService
from domain.models.currency import RateSnapshot
from domain.exceptions.currency import CacheError


@pytest.mark.asyncio
async def test_get_snapshot_cache_hit_returns_rate_snapshot():
    mock_redis = AsyncMock()
    cached_data = json.dumps({
        'rates': {'USD': 1.0, 'EUR': 0.85},
        'timestamp': '2025-11-05T10:30:00',
        'source': 'exchangerate-api'
    })

    mock_redis.get.return_value = cached_data
    cache_service = RedisCacheService(redis_client=mock_redis)
    result = await cache_service.get_snapshot()

    assert isinstance(result, RateSnapshot)
    assert result.rates == {'USD': 1.0, 'EUR': 0.85}
    assert result.timestamp == datetime(2025, 11, 5, 10, 30, 0)
    assert result.source == 'exchangerate-api'

    mock_redis.get.assert_called_once_with('rates:snapshot:USD')


@pytest.mark.asyncio
async def test_get_snapshot_cache_miss_returns_none():
    mock_redis = AsyncMock()
    mock_redis.get.return_value = None

    cache_service = RedisCacheService(redis_client=mock_redis)

    assert await cache_service.get_snapshot() is None


# ============================================================================
# TEST: get_snapshot() - Error Scenarios
# ============================================================================

@pytest.mark.asyncio
async def test_get_snapshot_malformed_json_raises_cache_error():
    mock_redis = AsyncMock()
    mock_redis.get.return_value = "{ invalid json }"

    cache_service = RedisCacheService(redis_client=mock_redis)

    with pytest.raises(CacheError) as exc_info:
        await cache_service.get_snapshot()

    assert 'Invalid json data' in str(exc_info.value)


@pytest.mark.asyncio
async def test_get_snapshot_missing_fields_raises_cache_error():
    mock_redis = AsyncMock()
    mock_redis.get.return_value = json.dumps({'rates': {'USD': 1.0}})

    cache_service = RedisCacheService(redis_client=mock_redis)

    with pytest.raises(CacheError):
        await cache_service.get_snapshot()


# ============================================================================
# TEST: set_snapshot() - Cache Write Scenarios
# ============================================================================

@pytest.mark.asyncio
async def test_set_snapshot_serializes_and_stores_with_ttl():
    mock_redis = AsyncMock()
    cache_service = RedisCacheService(redis_client=mock_redis)

    snapshot = RateSnapshot(
        rates={'USD': 1.0, 'EUR': 0.85, 'JPY': 151.2},
        timestamp=datetime(2025, 11, 5, 10, 30, 0),
        source='exchangerate-api'
    )

    await cache_service.set_snapshot(snapshot)

    mock_redis.setex.assert_called_once()
    key, ttl, stored_data = mock_redis.setex.call_args[0]

    assert key == 'rates:snapshot:USD'
    assert ttl == timedelta(hours=24)

    stored_dict = json.loads(stored_data)
    assert stored_dict['rates'] == {'USD': 1.0, 'EUR': 0.85, 'JPY': 151.2}
    assert stored_dict['timestamp'] == '2025-11-05T10:30:00'
    assert stored_dict['source'] == 'exchangerate-api'


@pytest.mark.asyncio
async def test_set_snapshot_uses_configured_ttl():
    mock_redis = AsyncMock()
    cache_service = RedisCacheService(redis_client=mock_redis, snapshot_ttl=timedelta(hours=1))

    await cache_service.set_snapshot(
        RateSnapshot(rates={'USD': 1.0}, timestamp=datetime.now(), source='test')
    )

    assert mock_redis.setex.call_args[0][1] == timedelta(hours=1)


# ============================================================================
# TEST: Key Generation Logic
# ============================================================================

def test_make_snapshot_key_format():
    cache_service = RedisCacheService(redis_client=AsyncMock())

    assert cache_service._make_snapshot_key() == 'rates:snapshot:USD'
    assert cache_service._make_snapshot_key('EUR') == 'rates:snapshot:EUR'


def test_default_ttl_value():
    cache_service = RedisCacheService(redis_client=AsyncMock())

    assert cache_service.snapshot_ttl == timedelta(hours=24)
