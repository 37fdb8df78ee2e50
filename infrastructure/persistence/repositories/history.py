from datetime import datetime

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from domain.models.currency import RateSnapshot
from domain.models.route import Route
from infrastructure.persistence.models.history import OptimizationHistoryDB, RateSnapshotDB


class RateSnapshotRepository:
	def __init__(self, db_session: AsyncSession):
		self.db_session = db_session

	async def save_snapshot(self, snapshot: RateSnapshot) -> None:
		self.db_session.add(
			RateSnapshotDB(
				base_currency='USD',
				rates=dict(snapshot.rates),
				timestamp=snapshot.timestamp,
				source=snapshot.source,
			)
		)

	async def get_latest_snapshot(self) -> RateSnapshot | None:
		stmt = select(RateSnapshotDB).order_by(RateSnapshotDB.timestamp.desc()).limit(1)
		result = await self.db_session.execute(stmt)
		row = result.scalars().first()
		if row is None:
			return None
		return RateSnapshot(
			rates={code: float(value) for code, value in row.rates.items()},
			timestamp=row.timestamp,
			source=row.source,
		)


class OptimizationHistoryRepository:
	def __init__(self, db_session: AsyncSession):
		self.db_session = db_session

	async def add(
		self, amount: float, route: Route, created_at: datetime
	) -> OptimizationHistoryDB:
		entry = OptimizationHistoryDB(
			from_currency=route.source_currency,
			to_currency=route.target_currency,
			amount=amount,
			route_name=route.display_name,
			route_kind=route.kind.value,
			converted_amount=route.converted_amount,
			route=route.to_dict(),
			created_at=created_at,
		)
		self.db_session.add(entry)
		await self.db_session.flush()
		return entry

	async def list_recent(self, limit: int) -> list[OptimizationHistoryDB]:
		stmt = (
			select(OptimizationHistoryDB)
			.order_by(OptimizationHistoryDB.created_at.desc(), OptimizationHistoryDB.id.desc())
			.limit(limit)
		)
		result = await self.db_session.execute(stmt)
		return list(result.scalars().all())

	async def trim(self, keep: int) -> None:
		keep_ids = (
			select(OptimizationHistoryDB.id)
			.order_by(OptimizationHistoryDB.created_at.desc(), OptimizationHistoryDB.id.desc())
			.limit(keep)
		)
		await self.db_session.execute(
			delete(OptimizationHistoryDB).where(OptimizationHistoryDB.id.not_in(keep_ids))
		)
