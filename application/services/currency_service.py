import logging
import math
from collections.abc import Sequence

from domain.exceptions.currency import InvalidAmountError, InvalidCurrencyError
from domain.models.currency import ALL_SUPPORTED_CURRENCIES

logger = logging.getLogger(__name__)


class CurrencyService:
	def __init__(self, supported: Sequence[str] = ALL_SUPPORTED_CURRENCIES):
		self.supported = tuple(supported)

	def get_supported_currencies(self) -> list[str]:
		return list(self.supported)

	def normalize(self, code: str) -> str:
		return code.strip().upper()

	def validate_currency(self, code: str) -> str:
		normalized = self.normalize(code)
		if normalized not in self.supported:
			logger.warning(f'Rejected unsupported currency {code!r}')
			raise InvalidCurrencyError(f'Currency {code} is not supported')
		return normalized

	def validate_amount(self, amount: float) -> float:
		if not math.isfinite(amount) or amount <= 0:
			logger.warning(f'Rejected amount {amount!r}')
			raise InvalidAmountError('amount must be a finite number greater than zero')
		return amount
