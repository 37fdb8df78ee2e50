import asyncio
import logging
from collections.abc import Sequence
from datetime import datetime

from redis.exceptions import RedisError
from sqlalchemy.exc import SQLAlchemyError
from tenacity import (
	AsyncRetrying,
	retry_if_exception_type,
	stop_after_attempt,
	wait_exponential,
)
from tenacity.wait import wait_base

from domain.exceptions.currency import CacheError, ProviderError
from domain.models.currency import ALL_SUPPORTED_CURRENCIES, RateSnapshot
from domain.models.rate_table import RateTable
from infrastructure.cache.redis_cache import RedisCacheService
from infrastructure.persistence.database import Database
from infrastructure.persistence.repositories.history import RateSnapshotRepository
from infrastructure.providers.base import ExchangeRateProvider

logger = logging.getLogger(__name__)


class RateService:
	"""
	Owns the current RateTable and swaps it wholesale when a new snapshot arrives.

	Snapshot lookup order on refresh: redis cache (unless forced), live providers
	in priority order, the last persisted snapshot. If all of them come up empty
	the current table (initially the static seed) stays in place.
	"""

	def __init__(
		self,
		primary_provider: ExchangeRateProvider,
		secondary_providers: Sequence[ExchangeRateProvider] = (),
		cache: RedisCacheService | None = None,
		db: Database | None = None,
		currencies: Sequence[str] = ALL_SUPPORTED_CURRENCIES,
		retry_attempts: int = 3,
		retry_wait: wait_base | None = None,
	):
		self.primary_provider = primary_provider
		self.secondary_providers = list(secondary_providers)
		self.cache = cache
		self.db = db
		self.currencies = tuple(currencies)
		self.retry_attempts = retry_attempts
		self.retry_wait = retry_wait or wait_exponential(multiplier=1, min=1, max=10)

		self._table = RateTable.seed()
		self._snapshot: RateSnapshot | None = None
		self._refresh_lock = asyncio.Lock()

	@property
	def table(self) -> RateTable:
		return self._table

	@property
	def snapshot(self) -> RateSnapshot | None:
		return self._snapshot

	@property
	def last_updated(self) -> datetime | None:
		return self._snapshot.timestamp if self._snapshot else None

	@property
	def source(self) -> str:
		return self._snapshot.source if self._snapshot else 'seed'

	def apply_snapshot(self, snapshot: RateSnapshot) -> bool:
		rebuilt = RateTable.from_usd_snapshot(snapshot.rates, self.currencies)
		if rebuilt is None:
			logger.warning(f'Ignoring rate snapshot from {snapshot.source}: no USD anchor')
			return False

		self._table = rebuilt
		self._snapshot = snapshot
		logger.info(f'Rate table rebuilt from {snapshot.source} snapshot ({len(snapshot.rates)} rates)')
		return True

	async def refresh(self, force: bool = False) -> RateTable:
		async with self._refresh_lock:
			cached = None if force else await self._load_cached_snapshot()
			if cached is not None and self.apply_snapshot(cached):
				return self._table

			fetched = await self._fetch_snapshot()
			if fetched is not None and self.apply_snapshot(fetched):
				await self._store_snapshot(fetched)
				return self._table

			persisted = await self._load_persisted_snapshot()
			if persisted is not None and self.last_updated and persisted.timestamp <= self.last_updated:
				persisted = None

			if persisted is None or not self.apply_snapshot(persisted):
				logger.warning(f'No fresh rate snapshot available, keeping {self.source} rates')
			return self._table

	async def _fetch_from_provider(self, provider: ExchangeRateProvider) -> dict[str, float]:
		async for attempt in AsyncRetrying(
			stop=stop_after_attempt(self.retry_attempts),
			wait=self.retry_wait,
			retry=retry_if_exception_type(ProviderError),
			reraise=True,
		):
			with attempt:
				return await provider.fetch_usd_rates(self.currencies)
		raise ProviderError(f'Provider {provider.name} returned no rates')

	async def _fetch_snapshot(self) -> RateSnapshot | None:
		for provider in [self.primary_provider] + self.secondary_providers:
			try:
				rates = await self._fetch_from_provider(provider)
			except ProviderError as e:
				logger.error(f'Provider {provider.name} failed: {e}')
				continue

			return RateSnapshot(rates=rates, timestamp=datetime.now(), source=provider.name)

		logger.error('All rate providers failed')
		return None

	async def _load_cached_snapshot(self) -> RateSnapshot | None:
		if self.cache is None:
			return None
		try:
			snapshot = await self.cache.get_snapshot()
		except (CacheError, RedisError) as e:
			logger.warning(f'Rate snapshot cache read failed: {e}')
			return None

		if snapshot is not None:
			logger.info(f'Using cached rate snapshot from {snapshot.timestamp.isoformat()}')
		return snapshot

	async def _store_snapshot(self, snapshot: RateSnapshot) -> None:
		if self.cache is not None:
			try:
				await self.cache.set_snapshot(snapshot)
			except RedisError as e:
				logger.warning(f'Rate snapshot cache write failed: {e}')

		if self.db is not None:
			try:
				async with self.db.managed_session() as session:
					await RateSnapshotRepository(session).save_snapshot(snapshot)
			except SQLAlchemyError as e:
				logger.warning(f'Rate snapshot could not be persisted: {e}')

	async def _load_persisted_snapshot(self) -> RateSnapshot | None:
		if self.db is None:
			return None
		try:
			async with self.db.managed_session() as session:
				snapshot = await RateSnapshotRepository(session).get_latest_snapshot()
		except SQLAlchemyError as e:
			logger.warning(f'Persisted rate snapshot lookup failed: {e}')
			return None

		if snapshot is not None:
			logger.warning(f'Falling back to persisted rate snapshot from {snapshot.timestamp.isoformat()}')
		return snapshot

	async def close(self) -> None:
		for provider in [self.primary_provider] + self.secondary_providers:
			await provider.close()
