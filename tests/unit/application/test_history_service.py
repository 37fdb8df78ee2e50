# nosec B101


from unittest.mock import Mock

import pytest
import pytest_asyncio

from application.services import CurrencyService, OptimizationHistoryService, RateService, RouteService
from domain.exceptions.currency import RouteNotFoundError
from infrastructure.persistence.database import Database


@pytest_asyncio.fixture
async def database(tmp_path):
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'history.db'}")
    await db.create_tables()
    yield db
    await db.close()


@pytest.fixture
def history_service(database):
    route_service = RouteService(
        rate_service=RateService(primary_provider=Mock(name='provider')),
        currency_service=CurrencyService(),
    )
    return OptimizationHistoryService(db=database, route_service=route_service, limit=3)


@pytest.mark.asyncio
async def test_record_defaults_to_best_route(history_service):
    record = await history_service.record(1000, 'USD', 'EUR')

    assert record.id is not None
    assert record.from_currency == 'USD'
    assert record.to_currency == 'EUR'
    assert record.route['display_name'] == 'Crypto Bridge'
    assert record.route['kind'] == 'direct'
    assert record.route['path'] == ['USD', 'EUR']


@pytest.mark.asyncio
async def test_record_named_route(history_service):
    record = await history_service.record(1000, 'USD', 'EUR', route_name='OFX')

    assert record.route['display_name'] == 'OFX'
    assert record.route['converted_amount'] == pytest.approx(917.24)


@pytest.mark.asyncio
async def test_record_unknown_route_name(history_service):
    with pytest.raises(RouteNotFoundError):
        await history_service.record(1000, 'USD', 'EUR', route_name='PayPal')


@pytest.mark.asyncio
async def test_recent_is_newest_first_and_trimmed(history_service):
    for amount in (100, 200, 300, 400, 500):
        await history_service.record(amount, 'GBP', 'INR')

    recent = await history_service.recent()

    assert [r.amount for r in recent] == [500, 400, 300]


@pytest.mark.asyncio
async def test_recent_with_explicit_limit(history_service):
    await history_service.record(100, 'USD', 'JPY')
    await history_service.record(200, 'USD', 'JPY')

    recent = await history_service.recent(limit=1)

    assert len(recent) == 1
    assert recent[0].amount == 200
