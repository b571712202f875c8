from .base import ExchangeRateProvider
from .decoder import JSONRateDecoder, RateDecoder
from .nbrb import NBRBProvider

__all__ = ['ExchangeRateProvider', 'JSONRateDecoder', 'NBRBProvider', 'RateDecoder']
