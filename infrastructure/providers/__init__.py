from .base import ExchangeRateProvider
from .exchangerate_api import ExchangeRateAPIProvider
from .openexchange import OpenExchangeProvider

__all__ = ['ExchangeRateProvider', 'ExchangeRateAPIProvider', 'OpenExchangeProvider']
