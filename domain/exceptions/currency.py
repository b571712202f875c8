class CurrencyException(Exception):
	kind = 'currency_error'


class InvalidCurrencyError(CurrencyException):
	kind = 'invalid_currency'


class UnknownCurrencyError(InvalidCurrencyError):
	kind = 'unknown_currency'

	def __init__(self, code: object):
		self.code = code
		super().__init__(f'Unknown currency code: {code!r}')


class UnsupportedCurrencyError(InvalidCurrencyError):
	"""The provider publishes no rate for this currency (the domestic BYN)."""

	kind = 'unsupported_currency'

	def __init__(self, currency: object):
		self.currency = currency
		super().__init__(f'Rates for {currency} are not published by the provider')


class ProviderError(CurrencyException):
	kind = 'provider_error'


class TransportError(ProviderError):
	kind = 'transport_error'

	def __init__(self, message: str, status_code: int | None = None):
		self.status_code = status_code
		super().__init__(message)


class NotFoundError(ProviderError):
	kind = 'not_found'

	def __init__(self, url: str):
		self.url = url
		super().__init__(f'Provider has no rate at {url}')


class MalformedResponseError(ProviderError):
	kind = 'malformed_response'


class FieldParseError(ProviderError):
	kind = 'field_parse_error'

	def __init__(self, field: str, cause: str):
		self.field = field
		self.cause = cause
		super().__init__(f'Cannot parse field {field}: {cause}')


class InvalidRateError(ProviderError):
	kind = 'invalid_rate'
