from decimal import Decimal
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from domain.exceptions.currency import FieldParseError, MalformedResponseError
from domain.models.currency import Currency, Rate

# pydantic error types meaning "the document is not the record we expect",
# as opposed to "a field is there but holds a bad value".
_SHAPE_ERRORS = {'json_invalid', 'json_type', 'model_type', 'model_attributes_type', 'missing'}


class RateDecoder(Protocol):
	def decode(self, body: str) -> Rate: ...


class NBRBRatePayload(BaseModel):
	"""Body of ``GET /ExRates/Rates/{id}``.

	Example::

		{"Cur_ID":145,"Date":"2018-09-21T00:00:00","Cur_Abbreviation":"USD",
		 "Cur_Scale":1,"Cur_Name":"Доллар США","Cur_OfficialRate":2.0884}
	"""

	model_config = ConfigDict(strict=True, frozen=True)

	cur_id: int = Field(alias='Cur_ID', ge=0)
	date: str = Field(alias='Date')
	cur_abbreviation: str = Field(alias='Cur_Abbreviation')
	cur_scale: int = Field(alias='Cur_Scale', ge=0)
	cur_name: str = Field(alias='Cur_Name')
	cur_official_rate: float = Field(alias='Cur_OfficialRate', ge=0, allow_inf_nan=False)


class JSONRateDecoder:
	"""Decodes a provider body into a :class:`Rate`, all fields or nothing."""

	def decode(self, body: str) -> Rate:
		try:
			payload = NBRBRatePayload.model_validate_json(body)
		except ValidationError as e:
			raise self._translate(e) from e

		currency = Currency.parse(payload.cur_abbreviation)
		if not currency.is_requestable:
			raise FieldParseError('Cur_Abbreviation', f'{currency} is the domestic currency')

		return Rate(
			id=payload.cur_id,
			date=payload.date,
			currency=currency,
			scale=payload.cur_scale,
			name=payload.cur_name,
			official_rate=Decimal(str(payload.cur_official_rate)),
		)

	@staticmethod
	def _translate(error: ValidationError) -> Exception:
		errors = error.errors()
		shape_errors = [err for err in errors if not err['loc'] or err['type'] in _SHAPE_ERRORS]
		if shape_errors:
			missing = [str(err['loc'][0]) for err in shape_errors if err['type'] == 'missing']
			if missing:
				return MalformedResponseError(f'Response is missing fields: {", ".join(missing)}')
			return MalformedResponseError(f'Response is not a rate record: {shape_errors[0]["msg"]}')

		first = errors[0]
		return FieldParseError(str(first['loc'][0]), first['msg'])
