from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	DATABASE_URL: str = 'sqlite+aiosqlite:///./route_optimizer.db'

	REDIS_URL: str = 'redis://localhost:6379'

	# Rate sources
	EXCHANGERATE_API_URL: str = 'https://api.exchangerate-api.com/v4'
	OPENEXCHANGE_APP_ID: str = ''
	PROVIDER_TIMEOUT_SECONDS: int = 10

	# Snapshots are daily, so a cached one is good for a day
	RATE_CACHE_TTL_HOURS: int = 24
	RATE_REFRESH_INTERVAL_SECONDS: int = 3600

	HISTORY_LIMIT: int = 10

	# Application
	APP_NAME: str = 'Transfer Route Optimizer API'
	DEBUG: bool = True

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
