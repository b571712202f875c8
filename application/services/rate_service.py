import logging
from datetime import date

from domain.exceptions.currency import CurrencyException
from domain.models.currency import Currency, Rate
from infrastructure.providers.base import ExchangeRateProvider

logger = logging.getLogger(__name__)


class RateService:
	def __init__(self, provider: ExchangeRateProvider):
		self.provider = provider

	def list_currencies(self) -> list[Currency]:
		return list(Currency)

	async def get_latest_rate(self, currency: Currency | str) -> Rate:
		currency = self._resolve(currency)
		try:
			rate = await self.provider.fetch_latest_rate(currency)
		except CurrencyException as e:
			logger.warning(f'Latest {currency} rate from {self.provider.name} failed ({e.kind}): {e}')
			raise

		logger.info(f'{currency} on {rate.date}: {rate.official_rate} per {rate.scale}')
		return rate

	async def get_rate_on_date(self, currency: Currency | str, on_date: str | date) -> Rate:
		currency = self._resolve(currency)
		try:
			rate = await self.provider.fetch_rate_on_date(currency, on_date)
		except CurrencyException as e:
			logger.warning(
				f'{currency} rate on {on_date} from {self.provider.name} failed ({e.kind}): {e}'
			)
			raise

		logger.info(f'{currency} on {rate.date}: {rate.official_rate} per {rate.scale}')
		return rate

	@staticmethod
	def _resolve(currency: Currency | str) -> Currency:
		if isinstance(currency, Currency):
			return currency
		return Currency.parse(currency)
