import logging
from datetime import timedelta
from typing import Annotated

from fastapi import Depends
from redis.asyncio import Redis

from application.services import (
	ConversionService,
	CurrencyService,
	OptimizationHistoryService,
	RateService,
	RouteService,
)
from config.settings import get_settings
from infrastructure.cache.redis_cache import RedisCacheService
from infrastructure.persistence.database import Database
from infrastructure.providers import (
	ExchangeRateAPIProvider,
	ExchangeRateProvider,
	OpenExchangeProvider,
)

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	db: Database | None = None
	redis_client: Redis | None = None
	redis_cache: RedisCacheService | None = None
	providers: dict[str, ExchangeRateProvider] | None = None
	rate_service: RateService | None = None


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.db = Database(settings.DATABASE_URL)
	deps.redis_client = Redis.from_url(settings.REDIS_URL, decode_responses=True)
	deps.redis_cache = RedisCacheService(
		deps.redis_client, snapshot_ttl=timedelta(hours=settings.RATE_CACHE_TTL_HOURS)
	)

	deps.providers = {
		'exchangerate-api': ExchangeRateAPIProvider(
			settings.EXCHANGERATE_API_URL, timeout=settings.PROVIDER_TIMEOUT_SECONDS
		),
	}
	if settings.OPENEXCHANGE_APP_ID:
		deps.providers['openexchange'] = OpenExchangeProvider(
			settings.OPENEXCHANGE_APP_ID, timeout=settings.PROVIDER_TIMEOUT_SECONDS
		)

	providers = list(deps.providers.values())
	deps.rate_service = RateService(
		primary_provider=providers[0],
		secondary_providers=providers[1:],
		cache=deps.redis_cache,
		db=deps.db,
	)
	logger.info(f'Dependencies initialized with rate providers: {", ".join(deps.providers)}')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.redis_client:
		await deps.redis_client.aclose()
	if deps.db:
		await deps.db.close()
	if deps.rate_service:
		await deps.rate_service.close()

	logger.info('Cleanup complete')


async def bootstrap() -> None:
	"""Create tables and load the first rate snapshot. Called after init_dependencies()."""
	logger.info('Bootstrapping application...')

	if deps.db is None or deps.rate_service is None:
		raise RuntimeError('Dependencies not initialized. Call init_dependencies() first.')

	await deps.db.create_tables()
	logger.info('Database tables created')

	# A failed refresh leaves the seed table in place; startup carries on
	await deps.rate_service.refresh()

	logger.info(f'Bootstrap complete, serving {deps.rate_service.source} rates')


def get_database() -> Database:
	if deps.db is None:
		raise RuntimeError('Database is not initialized')
	return deps.db


def get_rate_service() -> RateService:
	if deps.rate_service is None:
		raise RuntimeError('Rate service not initialized')
	return deps.rate_service


def get_currency_service() -> CurrencyService:
	return CurrencyService()


def get_route_service(
	rate_service: Annotated[RateService, Depends(get_rate_service)],
	currency_service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> RouteService:
	return RouteService(rate_service=rate_service, currency_service=currency_service)


def get_conversion_service(
	rate_service: Annotated[RateService, Depends(get_rate_service)],
	currency_service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> ConversionService:
	return ConversionService(rate_service=rate_service, currency_service=currency_service)


def get_history_service(
	db: Annotated[Database, Depends(get_database)],
	route_service: Annotated[RouteService, Depends(get_route_service)],
) -> OptimizationHistoryService:
	return OptimizationHistoryService(
		db=db, route_service=route_service, limit=get_settings().HISTORY_LIMIT
	)
