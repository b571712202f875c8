from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class RateResponse(BaseModel):
	id: int = Field(..., description='Provider record id')
	date: str = Field(..., description='Rate date as published by the provider')
	currency: str = Field(..., description='ISO 4217 currency code')
	scale: int = Field(..., description='Units of currency the official rate is quoted per')
	name: str = Field(..., description='Currency name as published by the provider')
	official_rate: Decimal = Field(..., description='Official rate in BYN per `scale` units')
	effective_rate: Decimal = Field(..., description='Cost of one unit in BYN')

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'id': 145,
				'date': '2018-09-21T00:00:00',
				'currency': 'USD',
				'scale': 1,
				'name': 'Доллар США',
				'official_rate': 2.0884,
				'effective_rate': 2.0884,
			}
		}
	)


class CurrencyInfo(BaseModel):
	code: str = Field(..., description='ISO 4217 currency code')
	provider_id: int = Field(..., description='NBRB internal currency id, 0 if not requestable')
	requestable: bool = Field(..., description='Whether rates can be requested for it')


class SupportedCurrenciesResponse(BaseModel):
	currencies: list[CurrencyInfo] = Field(description='Known currencies')


class ErrorResponse(BaseModel):
	detail: str
	error: str
