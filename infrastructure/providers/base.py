from datetime import date
from typing import Protocol

from domain.models.currency import Currency, Rate


class ExchangeRateProvider(Protocol):
	"""What the application layer needs from a rates provider."""

	@property
	def name(self) -> str: ...

	async def fetch_latest_rate(self, currency: Currency) -> Rate: ...

	async def fetch_rate_on_date(self, currency: Currency, on_date: str | date) -> Rate: ...

	async def close(self) -> None: ...
