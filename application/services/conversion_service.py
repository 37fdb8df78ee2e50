from application.services.currency_service import CurrencyService
from application.services.rate_service import RateService


class ConversionService:
	def __init__(self, rate_service: RateService, currency_service: CurrencyService):
		self.rate_service = rate_service
		self.currency_service = currency_service

	def convert(self, amount: float, from_currency: str, to_currency: str) -> dict:
		from_currency = self.currency_service.validate_currency(from_currency)
		to_currency = self.currency_service.validate_currency(to_currency)
		self.currency_service.validate_amount(amount)

		table = self.rate_service.table
		rate = table.rate(from_currency, to_currency) if from_currency != to_currency else 1.0

		return {
			'from_currency': from_currency,
			'to_currency': to_currency,
			'original_amount': amount,
			'converted_amount': table.convert(amount, from_currency, to_currency),
			'exchange_rate': rate,
			'timestamp': self.rate_service.last_updated,
			'source': self.rate_service.source,
		}
