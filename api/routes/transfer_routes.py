from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from api.dependencies import get_rate_service, get_route_service
from api.schemas import RouteResponse, RoutesResponse
from application.services import RateService, RouteService
from domain.exceptions.currency import RouteNotFoundError

router = APIRouter(prefix='/api/routes', tags=['routes'])


@router.get(
	'/{from_currency}/{to_currency}/{amount}',
	response_model=RoutesResponse,
	status_code=status.HTTP_200_OK,
	summary='Rank transfer routes, best first',
)
async def find_routes(
	from_currency: Annotated[str, Path(min_length=3, max_length=3)],
	to_currency: Annotated[str, Path(min_length=3, max_length=3)],
	amount: Annotated[float, Path(gt=0)],
	service: Annotated[RouteService, Depends(get_route_service)],
	rate_service: Annotated[RateService, Depends(get_rate_service)],
) -> RoutesResponse:
	from_currency = from_currency.upper()
	to_currency = to_currency.upper()

	routes = [RouteResponse.from_route(route) for route in service.find_routes(amount, from_currency, to_currency)]
	return RoutesResponse(
		from_currency=from_currency,
		to_currency=to_currency,
		amount=amount,
		best_route=routes[0] if routes else None,
		routes=routes,
		rates_source=rate_service.source,
		rates_timestamp=rate_service.last_updated,
	)


@router.get(
	'/{from_currency}/{to_currency}/{amount}/best',
	response_model=RouteResponse,
	status_code=status.HTTP_200_OK,
	summary='Best transfer route',
)
async def best_route(
	from_currency: Annotated[str, Path(min_length=3, max_length=3)],
	to_currency: Annotated[str, Path(min_length=3, max_length=3)],
	amount: Annotated[float, Path(gt=0)],
	service: Annotated[RouteService, Depends(get_route_service)],
) -> RouteResponse:
	route = service.best_route(amount, from_currency.upper(), to_currency.upper())
	if route is None:
		raise RouteNotFoundError(f'No route from {from_currency} to {to_currency}')
	return RouteResponse.from_route(route)
