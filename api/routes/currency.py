from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from api.dependencies import get_conversion_service, get_currency_service
from api.schemas import ConversionResponse, ProviderResponse, SupportedCurrenciesResponse
from application.services import ConversionService, CurrencyService
from domain.routing import MULTI_HOP_ELIGIBLE_PROVIDERS, PAYMENT_PROVIDERS

router = APIRouter(prefix='/api', tags=['currency'])


@router.get(
	'/convert/{from_currency}/{to_currency}/{amount}',
	response_model=ConversionResponse,
	status_code=status.HTTP_200_OK,
	summary='Convert currency amount',
)
async def convert_currency(
	from_currency: Annotated[str, Path(min_length=3, max_length=3)],
	to_currency: Annotated[str, Path(min_length=3, max_length=3)],
	amount: Annotated[float, Path(gt=0)],
	service: Annotated[ConversionService, Depends(get_conversion_service)],
) -> ConversionResponse:
	result = service.convert(amount, from_currency.upper(), to_currency.upper())
	return ConversionResponse(**result)


@router.get(
	'/currencies',
	response_model=SupportedCurrenciesResponse,
	status_code=status.HTTP_200_OK,
	summary='List supported currencies',
)
async def get_supported_currencies(
	service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> SupportedCurrenciesResponse:
	return SupportedCurrenciesResponse(currencies=service.get_supported_currencies())


@router.get(
	'/providers',
	response_model=list[ProviderResponse],
	status_code=status.HTTP_200_OK,
	summary='List transfer providers',
)
async def get_providers() -> list[ProviderResponse]:
	return [
		ProviderResponse(
			name=provider.name,
			base_fee_percent=provider.base_fee_percent,
			speed_label=provider.speed_label,
			reliability_score=provider.reliability_score,
			multi_hop_eligible=provider.name in MULTI_HOP_ELIGIBLE_PROVIDERS,
		)
		for provider in PAYMENT_PROVIDERS.values()
	]
