from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_rate_service, parse_currency_code
from api.schemas import CurrencyInfo, ErrorResponse, RateResponse, SupportedCurrenciesResponse
from application.services import RateService
from domain.models.currency import Currency

router = APIRouter(prefix='/api', tags=['rates'])


@router.get(
	'/rates/{currency}',
	response_model=RateResponse,
	status_code=status.HTTP_200_OK,
	summary='Get the official BYN rate of a currency',
	responses={
		400: {'model': ErrorResponse},
		404: {'model': ErrorResponse},
		502: {'model': ErrorResponse},
		503: {'model': ErrorResponse},
	},
)
async def get_rate(
	currency: Annotated[Currency, Depends(parse_currency_code)],
	service: Annotated[RateService, Depends(get_rate_service)],
	on_date: Annotated[date | None, Query(description='Rate date, today if omitted')] = None,
) -> RateResponse:
	if on_date is None:
		rate = await service.get_latest_rate(currency)
	else:
		rate = await service.get_rate_on_date(currency, on_date)
	return RateResponse(**rate.to_dict())


@router.get(
	'/currencies',
	response_model=SupportedCurrenciesResponse,
	status_code=status.HTTP_200_OK,
	summary='List known currencies',
)
async def get_currencies(
	service: Annotated[RateService, Depends(get_rate_service)],
) -> SupportedCurrenciesResponse:
	return SupportedCurrenciesResponse(
		currencies=[
			CurrencyInfo(
				code=currency.value,
				provider_id=currency.provider_id,
				requestable=currency.is_requestable,
			)
			for currency in service.list_currencies()
		]
	)
