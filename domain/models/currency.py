from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

from domain.exceptions.currency import (
	InvalidRateError,
	UnknownCurrencyError,
	UnsupportedCurrencyError,
)


class Currency(str, Enum):
	"""Currencies quoted by the National Bank of the Republic of Belarus.

	Values are ISO 4217 codes. BYN is the domestic currency: the bank does not
	quote it against itself, so it has no provider id.
	"""

	USD = 'USD'
	EUR = 'EUR'
	RUB = 'RUB'
	BYN = 'BYN'
	GBP = 'GBP'
	UAH = 'UAH'
	PLN = 'PLN'
	CNY = 'CNY'
	JPY = 'JPY'
	KZT = 'KZT'
	CHF = 'CHF'
	CAD = 'CAD'

	@classmethod
	def parse(cls, code: str) -> 'Currency':
		"""Strict lookup by uppercase code. 'usd' is not 'USD'."""
		if not isinstance(code, str):
			raise UnknownCurrencyError(code)
		try:
			return cls(code)
		except ValueError as e:
			raise UnknownCurrencyError(code) from e

	@classmethod
	def requestable(cls) -> list['Currency']:
		return [currency for currency in cls if currency.is_requestable]

	@property
	def provider_id(self) -> int:
		return _PROVIDER_IDS[self]

	@property
	def is_requestable(self) -> bool:
		return self.provider_id != DOMESTIC_PROVIDER_ID

	def __str__(self) -> str:
		return self.value


DOMESTIC_PROVIDER_ID = 0

_PROVIDER_IDS: dict[Currency, int] = {
	Currency.USD: 145,
	Currency.EUR: 19,
	Currency.RUB: 298,
	Currency.BYN: DOMESTIC_PROVIDER_ID,
	Currency.GBP: 143,
	Currency.UAH: 290,
	Currency.PLN: 293,
	Currency.CNY: 304,
	Currency.JPY: 295,
	Currency.KZT: 301,
	Currency.CHF: 130,
	Currency.CAD: 23,
}


@dataclass(frozen=True)
class Rate:
	id: int
	date: str  # verbatim from the provider, e.g. '2018-09-21T00:00:00'
	currency: Currency
	scale: int  # official_rate is quoted per `scale` units
	name: str
	official_rate: Decimal

	def __post_init__(self):
		if self.scale <= 0:
			raise InvalidRateError(f'Scale must be positive, got {self.scale} for {self.currency}')
		if not self.currency.is_requestable:
			raise UnsupportedCurrencyError(self.currency)

	def effective_rate(self) -> Decimal:
		"""Cost of one unit of the foreign currency in BYN."""
		return self.official_rate / self.scale

	def to_dict(self) -> dict[str, Any]:
		return {
			'id': self.id,
			'date': self.date,
			'currency': self.currency.value,
			'scale': self.scale,
			'name': self.name,
			'official_rate': self.official_rate,
			'effective_rate': self.effective_rate(),
		}
