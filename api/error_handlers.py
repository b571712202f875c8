import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.exceptions.currency import (
	CurrencyException,
	NotFoundError,
	ProviderError,
	TransportError,
	UnknownCurrencyError,
	UnsupportedCurrencyError,
)

logger = logging.getLogger(__name__)


class UnknownRequestedCurrencyError(UnknownCurrencyError):
	"""Unknown code in the request itself, as opposed to one sent back by the provider."""


def _error(status_code: int, exc: CurrencyException, detail: str | None = None) -> JSONResponse:
	return JSONResponse(
		status_code=status_code, content={'detail': detail or str(exc), 'error': exc.kind}
	)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(UnknownRequestedCurrencyError)
	async def unknown_requested_currency_handler(
		request: Request, exc: UnknownRequestedCurrencyError
	):
		return _error(400, exc)

	@app.exception_handler(UnsupportedCurrencyError)
	async def unsupported_currency_handler(request: Request, exc: UnsupportedCurrencyError):
		return _error(400, exc)

	@app.exception_handler(NotFoundError)
	async def not_found_handler(request: Request, exc: NotFoundError):
		return _error(404, exc, 'No rate published for this currency and date')

	@app.exception_handler(TransportError)
	async def transport_error_handler(request: Request, exc: TransportError):
		logger.error(f'Transport error: {exc}')
		return _error(503, exc, 'Exchange rate service unavailable')

	@app.exception_handler(UnknownCurrencyError)
	async def unknown_currency_handler(request: Request, exc: UnknownCurrencyError):
		logger.error(f'Provider answered with an unknown currency: {exc}')
		return _error(502, exc, 'Invalid response from exchange rate service')

	@app.exception_handler(ProviderError)
	async def provider_error_handler(request: Request, exc: ProviderError):
		logger.error(f'Provider error ({exc.kind}): {exc}')
		return _error(502, exc, 'Invalid response from exchange rate service')
