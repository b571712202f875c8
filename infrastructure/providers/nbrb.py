import logging
import time
from datetime import date

import httpx

from domain.exceptions.currency import (
	MalformedResponseError,
	NotFoundError,
	TransportError,
	UnsupportedCurrencyError,
)
from domain.models.currency import Currency, Rate
from infrastructure.providers.decoder import JSONRateDecoder, RateDecoder

logger = logging.getLogger(__name__)


class NBRBProvider:
	"""Official rates of the National Bank of the Republic of Belarus."""

	BASE_URL = 'http://www.nbrb.by/API/ExRates/Rates'

	def __init__(
		self,
		client: httpx.AsyncClient | None = None,
		base_url: str | None = None,
		decoder: RateDecoder | None = None,
		timeout: float = 10,
	):
		self.base_url = (base_url or self.BASE_URL).rstrip('/')
		self._client = client or httpx.AsyncClient(timeout=timeout)
		self._decoder = decoder or JSONRateDecoder()

	@property
	def name(self) -> str:
		return 'nbrb'

	def build_latest_url(self, currency: Currency) -> str:
		return f'{self.base_url}/{self._provider_id(currency)}'

	def build_dated_url(self, currency: Currency, on_date: str | date) -> str:
		# The date is not validated here: a bad one is the provider's to reject.
		if isinstance(on_date, date):
			on_date = on_date.isoformat()
		return f'{self.build_latest_url(currency)}?onDate={on_date}'

	@staticmethod
	def _provider_id(currency: Currency) -> int:
		if not currency.is_requestable:
			raise UnsupportedCurrencyError(currency)
		return currency.provider_id

	async def _request(self, url: str) -> str:
		start_time = time.perf_counter()
		try:
			response = await self._client.get(url)
			response.raise_for_status()
		except httpx.HTTPStatusError as e:
			status_code = e.response.status_code
			self._log_call(url, start_time, status_code=status_code, success=False)
			if status_code == httpx.codes.NOT_FOUND:
				raise NotFoundError(url) from e
			raise TransportError(
				f'NBRB HTTP error {status_code}: {e.response.text[:200]}', status_code=status_code
			) from e
		except httpx.RequestError as e:
			self._log_call(url, start_time, success=False, error=e.__class__.__name__)
			raise TransportError(f'NBRB request failed: {e.__class__.__name__}') from e

		self._log_call(url, start_time, status_code=response.status_code, success=True)

		body = response.text
		# Older API revisions answered missing rates with a bare "404" body.
		if body.startswith('404'):
			raise NotFoundError(url)
		return body

	def _log_call(
		self,
		url: str,
		start_time: float,
		success: bool,
		status_code: int | None = None,
		error: str | None = None,
	) -> None:
		response_time_ms = int((time.perf_counter() - start_time) * 1000)
		logger.log(
			logging.INFO if success else logging.WARNING,
			f'API call to {self.name}: {"SUCCESS" if success else "FAILED"} ({url})',
			extra={
				'extra_data': {
					'provider': self.name,
					'url': url,
					'status_code': status_code,
					'response_time_ms': response_time_ms,
					'success': success,
					'error': error,
				}
			},
		)

	async def fetch_latest_body(self, currency: Currency) -> str:
		"""Raw provider text for today's rate, undecoded."""
		return await self._request(self.build_latest_url(currency))

	async def fetch_body_on_date(self, currency: Currency, on_date: str | date) -> str:
		return await self._request(self.build_dated_url(currency, on_date))

	async def _fetch(self, url: str, currency: Currency) -> Rate:
		rate = self._decoder.decode(await self._request(url))
		if rate.currency is not currency:
			raise MalformedResponseError(f'Requested {currency}, provider answered with {rate.currency}')
		return rate

	async def fetch_latest_rate(self, currency: Currency) -> Rate:
		return await self._fetch(self.build_latest_url(currency), currency)

	async def fetch_rate_on_date(self, currency: Currency, on_date: str | date) -> Rate:
		return await self._fetch(self.build_dated_url(currency, on_date), currency)

	async def close(self) -> None:
		await self._client.aclose()
