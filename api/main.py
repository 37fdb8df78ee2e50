import asyncio
import logging
from contextlib import asynccontextmanager, suppress

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from api.dependencies import bootstrap, cleanup_dependencies, deps, init_dependencies
from api.error_handlers import register_exception_handlers
from api.routes import currency, history, rates, transfer_routes
from config.settings import get_settings
from workers.rate_refresher import RateRefresherWorker

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
	logger.info('Starting Transfer Route Optimizer API...')

	init_dependencies()
	await bootstrap()

	# Startup already refreshed, so the first periodic refresh waits one interval
	refresher = RateRefresherWorker(
		rate_service=deps.rate_service,
		update_interval=settings.RATE_REFRESH_INTERVAL_SECONDS,
		force=False,
	)
	refresh_task = asyncio.create_task(refresher.run(wait_first=True))

	logger.info('Application ready')

	yield

	logger.info('Shutting down...')
	refresher.stop()
	refresh_task.cancel()
	with suppress(asyncio.CancelledError):
		await refresh_task
	await cleanup_dependencies()


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
	logger.error(f'Unhandled exception: {exc}', exc_info=True)
	return JSONResponse(status_code=500, content={'detail': 'Internal server error'})


app.include_router(transfer_routes.router)
app.include_router(currency.router)
app.include_router(rates.router)
app.include_router(history.router)
register_exception_handlers(app)
