from .requests import HistoryRequest
from .responses import (
	ConversionResponse,
	HistoryEntryResponse,
	ProviderResponse,
	RateTableResponse,
	RouteResponse,
	RoutesResponse,
	SupportedCurrenciesResponse,
)

__all__ = [
	'ConversionResponse',
	'HistoryEntryResponse',
	'HistoryRequest',
	'ProviderResponse',
	'RateTableResponse',
	'RouteResponse',
	'RoutesResponse',
	'SupportedCurrenciesResponse',
]
