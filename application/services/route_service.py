import logging

from application.services.currency_service import CurrencyService
from application.services.rate_service import RateService
from domain.exceptions.currency import SameCurrencyError
from domain.models.route import Route
from domain.routing import generate_routes

logger = logging.getLogger(__name__)


class RouteService:
	"""Validates a transfer request, then hands it to the pure routing engine."""

	def __init__(self, rate_service: RateService, currency_service: CurrencyService):
		self.rate_service = rate_service
		self.currency_service = currency_service

	def _validate(self, amount: float, from_currency: str, to_currency: str) -> tuple[str, str]:
		from_currency = self.currency_service.validate_currency(from_currency)
		to_currency = self.currency_service.validate_currency(to_currency)

		if from_currency == to_currency:
			raise SameCurrencyError('from_currency and to_currency must be different')
		self.currency_service.validate_amount(amount)
		return from_currency, to_currency

	def find_routes(self, amount: float, from_currency: str, to_currency: str) -> list[Route]:
		from_currency, to_currency = self._validate(amount, from_currency, to_currency)

		# One table reference for the whole computation, even if a refresh lands mid-request
		table = self.rate_service.table
		routes = generate_routes(amount, from_currency, to_currency, table)

		logger.info(
			f'Found {len(routes)} routes for {amount} {from_currency}->{to_currency} '
			f'using {self.rate_service.source} rates'
		)
		return routes

	def best_route(self, amount: float, from_currency: str, to_currency: str) -> Route | None:
		routes = self.find_routes(amount, from_currency, to_currency)
		return routes[0] if routes else None
