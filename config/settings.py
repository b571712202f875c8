from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


class Settings(BaseSettings):
	NBRB_BASE_URL: str = 'http://www.nbrb.by/API/ExRates/Rates'
	HTTP_TIMEOUT: float = 10.0

	# Logging
	LOG_LEVEL: LogLevel = 'INFO'
	LOG_JSON: bool = False

	# Application
	APP_NAME: str = 'NBRB Rates API'
	DEBUG: bool = False

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')

	@field_validator('LOG_LEVEL', mode='before')
	@classmethod
	def uppercase_log_level(cls, v):
		return v.upper() if isinstance(v, str) else v


@lru_cache
def get_settings() -> Settings:
	return Settings()
