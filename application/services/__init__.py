from .conversion_service import ConversionService
from .currency_service import CurrencyService
from .history_service import OptimizationHistoryService
from .rate_service import RateService
from .route_service import RouteService

__all__ = [
	'ConversionService',
	'CurrencyService',
	'OptimizationHistoryService',
	'RateService',
	'RouteService',
]
