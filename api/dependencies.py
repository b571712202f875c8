import logging

from api.error_handlers import UnknownRequestedCurrencyError
from application.services import RateService
from config.settings import get_settings
from domain.exceptions.currency import UnknownCurrencyError
from domain.models.currency import Currency
from infrastructure.providers import ExchangeRateProvider, NBRBProvider

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	provider: ExchangeRateProvider | None = None


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.provider = NBRBProvider(base_url=settings.NBRB_BASE_URL, timeout=settings.HTTP_TIMEOUT)
	logger.info(f'Using {deps.provider.name} at {settings.NBRB_BASE_URL}')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.provider:
		await deps.provider.close()
		deps.provider = None

	logger.info('Cleanup complete')


def get_provider() -> ExchangeRateProvider:
	if deps.provider is None:
		raise RuntimeError('Provider not initialized')
	return deps.provider


def get_rate_service() -> RateService:
	return RateService(provider=get_provider())


def parse_currency_code(currency: str) -> Currency:
	"""Path parameter -> Currency; codes are accepted in any case."""
	try:
		return Currency.parse(currency.upper())
	except UnknownCurrencyError as e:
		raise UnknownRequestedCurrencyError(currency) from e
