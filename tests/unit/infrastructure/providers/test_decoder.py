import json
from decimal import Decimal

import pytest

from domain.exceptions.currency import (
	FieldParseError,
	InvalidRateError,
	MalformedResponseError,
	UnknownCurrencyError,
)
from domain.models.currency import Currency
from infrastructure.providers.decoder import JSONRateDecoder

USD_BODY = (
	'{"Cur_ID":145,"Date":"2018-09-21T00:00:00","Cur_Abbreviation":"USD",'
	'"Cur_Scale":1,"Cur_Name":"Dollar","Cur_OfficialRate":2.0884}'
)


def make_body(**overrides) -> str:
	payload = {
		'Cur_ID': 298,
		'Date': '2018-09-21T00:00:00',
		'Cur_Abbreviation': 'RUB',
		'Cur_Scale': 100,
		'Cur_Name': 'Российский рубль',
		'Cur_OfficialRate': 3.14,
	}
	payload.update(overrides)
	return json.dumps(payload, ensure_ascii=False)


@pytest.fixture
def decoder():
	return JSONRateDecoder()


def test_decode_reference_body(decoder):
	rate = decoder.decode(USD_BODY)

	assert rate.id == 145
	assert rate.date == '2018-09-21T00:00:00'
	assert rate.currency is Currency.USD
	assert rate.scale == 1
	assert rate.name == 'Dollar'
	assert rate.official_rate == Decimal('2.0884')
	assert rate.effective_rate() == Decimal('2.0884')


def test_decode_scaled_rate(decoder):
	rate = decoder.decode(make_body(Cur_Scale=100, Cur_OfficialRate=3.14))

	assert rate.effective_rate() == Decimal('0.0314')


def test_decode_non_ascii_name(decoder):
	rate = decoder.decode(make_body(Cur_Name='Доллар США'))

	assert rate.name == 'Доллар США'


def test_decode_name_with_separators(decoder):
	rate = decoder.decode(make_body(Cur_Name='Рубль, "российский": 100 ед.'))

	assert rate.name == 'Рубль, "российский": 100 ед.'
	assert rate.scale == 100
	assert rate.official_rate == Decimal('3.14')


def test_decode_date_without_time(decoder):
	rate = decoder.decode(make_body(Date='2018-04-20'))

	assert rate.date == '2018-04-20'


def test_decode_integer_rate(decoder):
	rate = decoder.decode(make_body(Cur_OfficialRate=3))

	assert rate.official_rate == Decimal('3.0')


def test_decode_ignores_field_order_and_extra_keys(decoder):
	body = (
		'{"Cur_OfficialRate":2.0884,"Cur_Name":"Dollar","Cur_Scale":1,'
		'"Cur_Abbreviation":"USD","Date":"2018-09-21T00:00:00","Cur_ID":145,"Extra":true}'
	)

	rate = decoder.decode(body)

	assert rate.currency is Currency.USD
	assert rate.official_rate == Decimal('2.0884')


def test_decode_zero_scale_is_invalid_rate(decoder):
	with pytest.raises(InvalidRateError):
		decoder.decode(make_body(Cur_Scale=0))


def test_decode_missing_fields_is_malformed(decoder):
	body = '{"Cur_ID":145,"Date":"2018-09-21T00:00:00","Cur_Abbreviation":"USD","Cur_Scale":1}'

	with pytest.raises(MalformedResponseError) as exc_info:
		decoder.decode(body)

	assert 'Cur_Name' in str(exc_info.value)
	assert 'Cur_OfficialRate' in str(exc_info.value)


@pytest.mark.parametrize('body', ['', 'not json', '{"Cur_ID":145,', '[]', '"USD"', '404 Not Found'])
def test_decode_non_record_is_malformed(decoder, body):
	with pytest.raises(MalformedResponseError):
		decoder.decode(body)


def test_decode_unknown_currency_code(decoder):
	with pytest.raises(UnknownCurrencyError) as exc_info:
		decoder.decode(make_body(Cur_Abbreviation='XDR'))

	assert exc_info.value.code == 'XDR'


def test_decode_lowercase_currency_code_is_unknown(decoder):
	with pytest.raises(UnknownCurrencyError):
		decoder.decode(make_body(Cur_Abbreviation='rub'))


def test_decode_domestic_currency_is_rejected(decoder):
	with pytest.raises(FieldParseError) as exc_info:
		decoder.decode(make_body(Cur_Abbreviation='BYN'))

	assert exc_info.value.field == 'Cur_Abbreviation'


@pytest.mark.parametrize(
	'field,value',
	[
		('Cur_ID', '145'),
		('Cur_ID', -1),
		('Cur_ID', 1.5),
		('Cur_Scale', '100'),
		('Cur_Scale', -100),
		('Cur_Scale', True),
		('Date', 20180921),
		('Cur_Name', None),
		('Cur_Abbreviation', 643),
		('Cur_OfficialRate', '3.14'),
		('Cur_OfficialRate', -3.14),
		('Cur_OfficialRate', None),
	],
)
def test_decode_bad_field_value(decoder, field, value):
	with pytest.raises(FieldParseError) as exc_info:
		decoder.decode(make_body(**{field: value}))

	assert exc_info.value.field == field


@pytest.mark.parametrize('raw_rate', ['1e400', 'NaN'])
def test_decode_non_finite_rate(decoder, raw_rate):
	body = make_body(Cur_OfficialRate=3.14).replace('3.14', raw_rate)

	with pytest.raises(FieldParseError) as exc_info:
		decoder.decode(body)

	assert exc_info.value.field == 'Cur_OfficialRate'
