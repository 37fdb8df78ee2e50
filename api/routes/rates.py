from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_currency_service, get_rate_service
from api.schemas import RateTableResponse
from application.services import CurrencyService, RateService
from domain.exceptions.currency import ProviderError

router = APIRouter(prefix='/api/rates', tags=['rates'])


def _table_response(rate_service: RateService, base: str) -> RateTableResponse:
	return RateTableResponse(
		base_currency=base,
		rates=rate_service.table.row(base),
		source=rate_service.source,
		timestamp=rate_service.last_updated,
	)


@router.get(
	'',
	response_model=RateTableResponse,
	status_code=status.HTTP_200_OK,
	summary='Current cross rates for one base currency',
)
async def get_rates(
	rate_service: Annotated[RateService, Depends(get_rate_service)],
	currency_service: Annotated[CurrencyService, Depends(get_currency_service)],
	base: Annotated[str, Query(min_length=3, max_length=3)] = 'USD',
) -> RateTableResponse:
	return _table_response(rate_service, currency_service.validate_currency(base))


@router.post(
	'/refresh',
	response_model=RateTableResponse,
	status_code=status.HTTP_200_OK,
	summary='Fetch a fresh snapshot and rebuild the rate table',
)
async def refresh_rates(
	rate_service: Annotated[RateService, Depends(get_rate_service)],
) -> RateTableResponse:
	previous = rate_service.last_updated
	await rate_service.refresh(force=True)

	if rate_service.last_updated is None or rate_service.last_updated == previous:
		raise ProviderError('No rate provider returned a fresh snapshot')
	return _table_response(rate_service, 'USD')
