import logging
from datetime import datetime

from application.services.route_service import RouteService
from domain.exceptions.currency import RouteNotFoundError
from domain.models.route import OptimizationRecord
from infrastructure.persistence.database import Database
from infrastructure.persistence.models.history import OptimizationHistoryDB
from infrastructure.persistence.repositories.history import OptimizationHistoryRepository

logger = logging.getLogger(__name__)


class OptimizationHistoryService:
	"""Keeps the most recent route selections, newest first."""

	def __init__(self, db: Database, route_service: RouteService, limit: int = 10):
		self.db = db
		self.route_service = route_service
		self.limit = limit

	@staticmethod
	def _to_record(row: OptimizationHistoryDB) -> OptimizationRecord:
		return OptimizationRecord(
			id=row.id,
			amount=row.amount,
			from_currency=row.from_currency,
			to_currency=row.to_currency,
			route=row.route,
			created_at=row.created_at,
		)

	async def record(
		self,
		amount: float,
		from_currency: str,
		to_currency: str,
		route_name: str | None = None,
	) -> OptimizationRecord:
		# Routes are re-priced server side; the caller only names its choice
		routes = self.route_service.find_routes(amount, from_currency, to_currency)
		if route_name is None:
			selected = routes[0] if routes else None
		else:
			selected = next((r for r in routes if r.display_name == route_name), None)

		if selected is None:
			raise RouteNotFoundError(f'Route {route_name} is not among the ranked routes')

		async with self.db.managed_session() as session:
			repo = OptimizationHistoryRepository(session)
			row = await repo.add(amount, selected, created_at=datetime.now())
			await repo.trim(self.limit)
			record = self._to_record(row)

		logger.info(f'Recorded route selection {selected.display_name} for {amount} {from_currency}')
		return record

	async def recent(self, limit: int | None = None) -> list[OptimizationRecord]:
		async with self.db.managed_session() as session:
			rows = await OptimizationHistoryRepository(session).list_recent(limit or self.limit)
			return [self._to_record(row) for row in rows]
