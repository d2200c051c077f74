"""
Domain value objects.

Точные числовые типы: BigInteger и Rational.
"""

from exactarith.core.domain.big_integer import BigInteger
from exactarith.core.domain.rational import Rational, gcd

__all__ = [
    "BigInteger",
    "Rational",
    "gcd",
]
