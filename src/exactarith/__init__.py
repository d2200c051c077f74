"""
exactarith — точная целочисленная и рациональная арифметика.

Целые неограниченной величины хранятся как limbs base 10000;
умножение идёт через FFT-свёртку с проверяемым бюджетом точности.
"""

from exactarith.core.domain import BigInteger, Rational, gcd
from exactarith.core.math import DivisionByZero, InvalidDecimalFormat, PrecisionLimitExceeded
from exactarith.core.settings import ArithmeticSettings, configure, get_settings, reset_settings

__version__ = "0.1.0"

__all__ = [
    # Value types
    "BigInteger",
    "Rational",
    "gcd",
    # Exceptions
    "DivisionByZero",
    "InvalidDecimalFormat",
    "PrecisionLimitExceeded",
    # Settings
    "ArithmeticSettings",
    "configure",
    "get_settings",
    "reset_settings",
]
