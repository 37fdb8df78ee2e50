import asyncio
import logging
import signal
from datetime import datetime

from api.dependencies import bootstrap, cleanup_dependencies, deps, init_dependencies
from application.services import RateService
from config.settings import get_settings

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class RateRefresherWorker:
    """
    Background loop that keeps a RateService's table fresh.

    The standalone worker forces a provider fetch every cycle and writes the
    snapshot to the redis cache and snapshot history. The API runs the same
    loop in-process without forcing, so a cache entry the worker wrote is
    picked up before any provider is called.
    """
    def __init__(self, rate_service: RateService, update_interval: int = 3600, force: bool = True):
        self.rate_service = rate_service
        self.update_interval = update_interval
        self.force = force
        self.is_running = False
        self.cycle_count = 0

    async def update_cycle(self) -> bool:
        """Run one refresh. Returns True when a new snapshot was applied."""
        cycle_start = datetime.now()
        previous = self.rate_service.last_updated

        await self.rate_service.refresh(force=self.force)

        refreshed = self.rate_service.last_updated is not None and self.rate_service.last_updated != previous
        cycle_duration = (datetime.now() - cycle_start).total_seconds()

        if refreshed:
            logger.info(
                f"Refresh cycle completed in {cycle_duration:.2f}s using {self.rate_service.source}"
            )
        else:
            logger.warning(
                f"Refresh cycle finished in {cycle_duration:.2f}s without a new snapshot, "
                f"still serving {self.rate_service.source} rates"
            )
        return refreshed

    async def run(self, wait_first: bool = False):
        """
        Main worker loop. Runs until stop() is called or the task is cancelled.

        With wait_first the first cycle starts after one full interval, for
        callers that have just refreshed on their own.
        """
        self.is_running = True
        logger.info(f"Rate Refresher Worker started, interval {self.update_interval}s")

        wait = wait_first
        while self.is_running:
            try:
                if wait:
                    await asyncio.sleep(self.update_interval)
                    if not self.is_running:
                        break
                wait = True

                self.cycle_count += 1
                logger.info(f"Cycle #{self.cycle_count}")

                await self.update_cycle()

            except asyncio.CancelledError:
                logger.info("Worker received cancellation signal")
                break
            except Exception as e:
                logger.error(f"Error in worker cycle: {e}", exc_info=True)

        logger.info("Rate Refresher Worker stopped")

    def stop(self):
        logger.info("Stopping Rate Refresher Worker...")
        self.is_running = False


async def main():
    settings = get_settings()

    init_dependencies()
    await bootstrap()

    worker = RateRefresherWorker(
        rate_service=deps.rate_service,
        update_interval=settings.RATE_REFRESH_INTERVAL_SECONDS,
    )

    def signal_handler(sig, frame):
        logger.info(f"Received signal {sig}, shutting down gracefully...")
        worker.stop()

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    try:
        await worker.run()
    finally:
        await cleanup_dependencies()
        logger.info("Cleanup completed")


if __name__ == "__main__":
    asyncio.run(main())
