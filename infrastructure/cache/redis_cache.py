import json
from datetime import datetime, timedelta

from redis import asyncio as redis

from domain.exceptions.currency import CacheError
from domain.models.currency import RateSnapshot


class RedisCacheService:
    def __init__(self, redis_client: redis.Redis, snapshot_ttl: timedelta = timedelta(hours=24)):
        self.redis = redis_client
        self.snapshot_ttl = snapshot_ttl

    def _make_snapshot_key(self, base_currency: str = "USD") -> str:
        return f"rates:snapshot:{base_currency}"

    async def get_snapshot(self, base_currency: str = "USD") -> RateSnapshot | None:
        key = self._make_snapshot_key(base_currency)
        data = await self.redis.get(key)

        if not data:
            return None

        try:
            snapshot_dict = json.loads(data)
            return RateSnapshot(
                rates={code: float(value) for code, value in snapshot_dict["rates"].items()},
                timestamp=datetime.fromisoformat(snapshot_dict["timestamp"]),
                source=snapshot_dict["source"],
            )
        except (json.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError) as e:
            raise CacheError(f"Invalid json data for {key}: {e}") from e

    async def set_snapshot(self, snapshot: RateSnapshot, base_currency: str = "USD") -> None:
        key = self._make_snapshot_key(base_currency)

        snapshot_dict = {
            "rates": snapshot.rates,
            "timestamp": snapshot.timestamp.isoformat(),
            "source": snapshot.source,
        }

        await self.redis.setex(key, self.snapshot_ttl, json.dumps(snapshot_dict))

