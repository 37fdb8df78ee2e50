from datetime import datetime

from sqlalchemy import JSON, DateTime, Float, Index, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
	pass


class RateSnapshotDB(Base):
	__tablename__ = 'rate_snapshots'

	id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
	base_currency: Mapped[str] = mapped_column(String(5), nullable=False, default='USD')
	rates: Mapped[dict] = mapped_column(JSON, nullable=False)
	timestamp: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)
	source: Mapped[str] = mapped_column(String(50), nullable=False)


class OptimizationHistoryDB(Base):
	__tablename__ = 'optimization_history'

	id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
	from_currency: Mapped[str] = mapped_column(String(5), nullable=False)
	to_currency: Mapped[str] = mapped_column(String(5), nullable=False)
	amount: Mapped[float] = mapped_column(Float, nullable=False)
	route_name: Mapped[str] = mapped_column(String(100), nullable=False)
	route_kind: Mapped[str] = mapped_column(String(20), nullable=False)
	converted_amount: Mapped[float] = mapped_column(Float, nullable=False)
	route: Mapped[dict] = mapped_column(JSON, nullable=False)
	created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)

	__table_args__ = (Index('idx_history_created_at', 'created_at'),)
