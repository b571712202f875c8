from .responses import CurrencyInfo, ErrorResponse, RateResponse, SupportedCurrenciesResponse

__all__ = [
	'CurrencyInfo',
	'ErrorResponse',
	'RateResponse',
	'SupportedCurrenciesResponse',
]
