"""
Rational — точная рациональная арифметика над BigInteger

Пара (numerator, denominator), всегда в приведённой форме:
- denominator > 0
- gcd(|numerator|, denominator) == 1

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Приведение (_reduce) после каждой операции, создающей значение
2. Знак хранится только в числителе
3. Нулевой знаменатель → DivisionByZero

ФОРМУЛЫ:
    a/b ± c/d = (a·d ± b·c) / (b·d)
    a/b × c/d = (a·c) / (b·d)
    a/b ÷ c/d = (a·d) / (b·c)
"""

from typing import Any, Dict, Union

from exactarith.core.contracts.validators import validate_rational
from exactarith.core.domain.big_integer import BigInteger
from exactarith.core.math.division import DivisionByZero
from exactarith.core.settings import get_settings

RationalLike = Union["Rational", BigInteger, int]


def gcd(a: BigInteger, b: BigInteger) -> BigInteger:
    """
    Наибольший общий делитель алгоритмом Евклида (gcd(a, 0) = a).

    Итеративный вариант: глубина рекурсии не зависит от величины чисел.

    Examples:
        >>> gcd(BigInteger(12), BigInteger(18))
        BigInteger('6')
    """
    while b:
        a, b = b, a % b
    return a


class Rational:
    """
    Точная дробь.

    Construction:
        Rational(3), Rational(BigInteger("7")), Rational(1, 3), Rational(6, -4) → -3/2
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(
        self,
        value: Union["Rational", BigInteger, int] = 0,
        denominator: Union[BigInteger, int] = 1,
    ):
        if isinstance(value, Rational):
            if denominator != 1:
                raise TypeError("denominator must not be given together with a Rational")
            self._numerator = value._numerator
            self._denominator = value._denominator
            return

        numerator = BigInteger(value)
        denominator = BigInteger(denominator)
        if not denominator:
            raise DivisionByZero("rational with zero denominator")

        self._numerator = numerator
        self._denominator = denominator
        self._restore_sign()
        self._reduce()

    @classmethod
    def _from_parts(cls, numerator: BigInteger, denominator: BigInteger) -> "Rational":
        instance = cls.__new__(cls)
        instance._numerator = numerator
        instance._denominator = denominator
        instance._restore_sign()
        instance._reduce()
        return instance

    @classmethod
    def _coerce(cls, value: Any) -> "Rational | None":
        if isinstance(value, Rational):
            return value
        if isinstance(value, BigInteger) or (isinstance(value, int) and not isinstance(value, bool)):
            return cls(value)
        return None

    def _restore_sign(self) -> None:
        if self._denominator.is_negative:
            self._numerator = -self._numerator
            self._denominator = -self._denominator

    def _reduce(self) -> None:
        divisor = gcd(abs(self._numerator), self._denominator)
        if divisor != 1:
            self._numerator = self._numerator // divisor
            self._denominator = self._denominator // divisor

    # =========================================================================
    # СВОЙСТВА
    # =========================================================================

    @property
    def numerator(self) -> BigInteger:
        return self._numerator

    @property
    def denominator(self) -> BigInteger:
        return self._denominator

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def __neg__(self) -> "Rational":
        return Rational._from_parts(-self._numerator, self._denominator)

    def __pos__(self) -> "Rational":
        return self

    def __abs__(self) -> "Rational":
        return Rational._from_parts(abs(self._numerator), self._denominator)

    def __add__(self, other: Any) -> "Rational":
        other = Rational._coerce(other)
        if other is None:
            return NotImplemented
        return Rational._from_parts(
            self._numerator * other._denominator + self._denominator * other._numerator,
            self._denominator * other._denominator,
        )

    __radd__ = __add__

    def __sub__(self, other: Any) -> "Rational":
        other = Rational._coerce(other)
        if other is None:
            return NotImplemented
        return self + (-other)

    def __rsub__(self, other: Any) -> "Rational":
        other = Rational._coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other: Any) -> "Rational":
        other = Rational._coerce(other)
        if other is None:
            return NotImplemented
        return Rational._from_parts(
            self._numerator * other._numerator,
            self._denominator * other._denominator,
        )

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> "Rational":
        other = Rational._coerce(other)
        if other is None:
            return NotImplemented
        if not other._numerator:
            raise DivisionByZero("division by zero rational")
        # _from_parts переносит знак знаменателя в числитель
        return Rational._from_parts(
            self._numerator * other._denominator,
            self._denominator * other._numerator,
        )

    def __rtruediv__(self, other: Any) -> "Rational":
        other = Rational._coerce(other)
        if other is None:
            return NotImplemented
        return other / self

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def compare(self, other: RationalLike) -> int:
        """
        Трёхзначное сравнение: -1, 0 или +1.

        Разные знаки → без умножений, иначе перекрёстное умножение.
        """
        other_value = Rational._coerce(other)
        if other_value is None:
            raise TypeError(f"cannot compare Rational with {type(other).__name__}")

        if self._numerator.is_negative != other_value._numerator.is_negative:
            return -1 if self._numerator.is_negative else 1

        left = self._numerator * other_value._denominator
        right = self._denominator * other_value._numerator
        return left.compare(right)

    def __eq__(self, other: object) -> bool:
        other = Rational._coerce(other)
        if other is None:
            return NotImplemented
        # Приведённая форма единственна
        return self._numerator == other._numerator and self._denominator == other._denominator

    def __lt__(self, other: Any) -> bool:
        if Rational._coerce(other) is None:
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: Any) -> bool:
        if Rational._coerce(other) is None:
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if Rational._coerce(other) is None:
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: Any) -> bool:
        if Rational._coerce(other) is None:
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    def __bool__(self) -> bool:
        return bool(self._numerator)

    # =========================================================================
    # КОНВЕРСИИ
    # =========================================================================

    def __str__(self) -> str:
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self) -> str:
        return f"Rational('{self}')"

    def as_decimal(self, precision: int = 0) -> str:
        """
        Десятичная запись с precision дробными цифрами (усечение к нулю).

        Алгоритм:
            scaled = numerator * 10^precision // denominator
            точка вставляется precision позиций справа, при нехватке цифр
            модуль дополняется нулями слева; знак выводится один раз

        Args:
            precision: Количество дробных цифр (>= 0)

        Returns:
            Десятичная строка

        Raises:
            ValueError: Если precision < 0

        Examples:
            >>> Rational(1, 3).as_decimal(4)
            '0.3333'
            >>> Rational(-1, 8).as_decimal(2)
            '-0.12'
            >>> Rational(7, 2).as_decimal()
            '3'
        """
        if precision < 0:
            raise ValueError(f"precision must be non-negative, got {precision}")

        scaled = self._numerator.shift(precision) // self._denominator
        if precision == 0:
            return str(scaled)

        digits = str(abs(scaled))
        if len(digits) <= precision:
            digits = "0" * (precision + 1 - len(digits)) + digits

        sign = "-" if self._numerator.is_negative else ""
        return f"{sign}{digits[:-precision]}.{digits[-precision:]}"

    def __float__(self) -> float:
        return float(self.as_decimal(get_settings().rational_float_precision))

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация в контракт rational."""
        return {
            "numerator": self._numerator.to_dict(),
            "denominator": self._denominator.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Rational":
        """
        Десериализация из контракта rational с повторным приведением.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
            DivisionByZero: Если знаменатель равен нулю
        """
        validate_rational(data)
        return cls(
            BigInteger.from_dict(data["numerator"]),
            BigInteger.from_dict(data["denominator"]),
        )
