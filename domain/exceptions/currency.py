class CurrencyException(Exception):
    pass


class InvalidCurrencyError(CurrencyException):
    pass


class SameCurrencyError(CurrencyException):
    pass


class InvalidAmountError(CurrencyException):
    pass


class UnknownProviderError(CurrencyException):
    pass


class ProviderError(CurrencyException):
    pass


class CacheError(CurrencyException):
    pass


class RouteNotFoundError(CurrencyException):
    pass
