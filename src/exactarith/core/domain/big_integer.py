"""
BigInteger — знаковое целое неограниченной величины

Immutable value object над limbs (base 10000, little-endian) и флагом знака.
Вся арифметика маршрутизируется в движки core.math:
- +, - → Additive Engine
- * → Multiplicative Engine (FFT)
- //, %, divmod → Division Engine (усечение к нулю, как decimal.Decimal)
- str/parse → Decimal Codec

Составные операторы (+=, *=, ...) перепривязывают имя к новому значению,
поэтому копии никогда не разделяют состояние.
"""

from typing import Any, Dict, TextIO, Union

from exactarith.core.contracts.validators import validate_big_integer
from exactarith.core.math.additive import signed_add
from exactarith.core.math.codec import format_decimal, parse_decimal, read_token, shift_decimal
from exactarith.core.math.division import divmod_signed
from exactarith.core.math.fft import multiply_magnitudes
from exactarith.core.math.limbs import (
    BASE,
    canonical_sign,
    digit_count,
    is_zero_magnitude,
    limbs_from_int,
    normalize,
    validate_limbs,
)
from exactarith.core.math.ordering import compare_signed
from exactarith.core.settings import get_settings

IntegerLike = Union["BigInteger", int]


class BigInteger:
    """
    Точное знаковое целое.

    Construction:
        BigInteger(12345), BigInteger("-987654321"), BigInteger(other)

    Деление усекается к нулю, остаток имеет знак делимого:
        BigInteger(-7) // 2 == -3
        BigInteger(-7) % 2 == -1
    """

    __slots__ = ("_negative", "_limbs")

    def __init__(self, value: Union["BigInteger", int, str] = 0):
        if isinstance(value, BigInteger):
            negative, limbs = value._negative, list(value._limbs)
        elif isinstance(value, bool):
            raise TypeError("BigInteger cannot be constructed from bool")
        elif isinstance(value, int):
            negative, limbs = value < 0, limbs_from_int(value)
        elif isinstance(value, str):
            negative, limbs = parse_decimal(value)
        else:
            raise TypeError(f"BigInteger cannot be constructed from {type(value).__name__}")

        self._negative = negative
        self._limbs = tuple(limbs)

    @classmethod
    def _from_parts(cls, negative: bool, limbs: list[int]) -> "BigInteger":
        """Сборка из результата движка с восстановлением инвариантов."""
        instance = cls.__new__(cls)
        normalize(limbs)
        instance._negative = canonical_sign(negative, limbs)
        instance._limbs = tuple(limbs)
        return instance

    @classmethod
    def _coerce(cls, value: Any) -> "BigInteger | None":
        if isinstance(value, BigInteger):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        return None

    # =========================================================================
    # СВОЙСТВА
    # =========================================================================

    @property
    def is_negative(self) -> bool:
        return self._negative

    @property
    def limbs(self) -> tuple[int, ...]:
        """Limbs модуля, младший первым."""
        return self._limbs

    def is_zero(self) -> bool:
        return is_zero_magnitude(list(self._limbs))

    def digit_count(self) -> int:
        """Количество десятичных цифр модуля."""
        return digit_count(list(self._limbs))

    def shift(self, places: int) -> "BigInteger":
        """Умножение на 10^places через десятичный сдвиг."""
        return BigInteger._from_parts(self._negative, shift_decimal(list(self._limbs), places))

    def increment(self) -> "BigInteger":
        return self + 1

    def decrement(self) -> "BigInteger":
        return self - 1

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def __neg__(self) -> "BigInteger":
        return BigInteger._from_parts(not self._negative, list(self._limbs))

    def __pos__(self) -> "BigInteger":
        return self

    def __abs__(self) -> "BigInteger":
        return BigInteger._from_parts(False, list(self._limbs))

    def __add__(self, other: Any) -> "BigInteger":
        other = BigInteger._coerce(other)
        if other is None:
            return NotImplemented
        negative, limbs = signed_add(
            self._negative, list(self._limbs), other._negative, list(other._limbs)
        )
        return BigInteger._from_parts(negative, limbs)

    __radd__ = __add__

    def __sub__(self, other: Any) -> "BigInteger":
        other = BigInteger._coerce(other)
        if other is None:
            return NotImplemented
        return self + (-other)

    def __rsub__(self, other: Any) -> "BigInteger":
        other = BigInteger._coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other: Any) -> "BigInteger":
        other = BigInteger._coerce(other)
        if other is None:
            return NotImplemented
        settings = get_settings()
        limbs = multiply_magnitudes(
            list(self._limbs),
            list(other._limbs),
            max_transform_length=settings.max_transform_length,
            rounding_tolerance=settings.rounding_tolerance,
        )
        return BigInteger._from_parts(self._negative != other._negative, limbs)

    __rmul__ = __mul__

    def __divmod__(self, other: Any) -> "tuple[BigInteger, BigInteger]":
        other = BigInteger._coerce(other)
        if other is None:
            return NotImplemented
        (q_negative, quotient), (r_negative, remainder) = divmod_signed(
            self._negative, list(self._limbs), other._negative, list(other._limbs)
        )
        return BigInteger._from_parts(q_negative, quotient), BigInteger._from_parts(r_negative, remainder)

    def __rdivmod__(self, other: Any) -> "tuple[BigInteger, BigInteger]":
        other = BigInteger._coerce(other)
        if other is None:
            return NotImplemented
        return divmod(other, self)

    def __floordiv__(self, other: Any) -> "BigInteger":
        result = self.__divmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[0]

    def __rfloordiv__(self, other: Any) -> "BigInteger":
        other = BigInteger._coerce(other)
        if other is None:
            return NotImplemented
        return other // self

    def __mod__(self, other: Any) -> "BigInteger":
        result = self.__divmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[1]

    def __rmod__(self, other: Any) -> "BigInteger":
        other = BigInteger._coerce(other)
        if other is None:
            return NotImplemented
        return other % self

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def compare(self, other: IntegerLike) -> int:
        """Трёхзначное сравнение: -1, 0 или +1."""
        other_value = BigInteger._coerce(other)
        if other_value is None:
            raise TypeError(f"cannot compare BigInteger with {type(other).__name__}")
        return compare_signed(
            self._negative, list(self._limbs), other_value._negative, list(other_value._limbs)
        )

    def __eq__(self, other: object) -> bool:
        other = BigInteger._coerce(other)
        if other is None:
            return NotImplemented
        return self._negative == other._negative and self._limbs == other._limbs

    def __lt__(self, other: Any) -> bool:
        if BigInteger._coerce(other) is None:
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: Any) -> bool:
        if BigInteger._coerce(other) is None:
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if BigInteger._coerce(other) is None:
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: Any) -> bool:
        if BigInteger._coerce(other) is None:
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        # Согласовано с int: BigInteger(5) == 5 ⇒ одинаковый hash
        return hash(int(self))

    def __bool__(self) -> bool:
        return not self.is_zero()

    # =========================================================================
    # КОНВЕРСИИ
    # =========================================================================

    def __int__(self) -> int:
        # Свёртка по limbs: int(str) ограничен sys.get_int_max_str_digits()
        value = 0
        for limb in reversed(self._limbs):
            value = value * BASE + limb
        return -value if self._negative else value

    def __str__(self) -> str:
        return format_decimal(self._negative, list(self._limbs))

    def __repr__(self) -> str:
        return f"BigInteger('{self}')"

    @classmethod
    def read(cls, stream: TextIO) -> "BigInteger":
        """Разбор одного токена из текстового потока."""
        return cls(read_token(stream))

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация в контракт big_integer."""
        return {"negative": self._negative, "limbs": list(self._limbs)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BigInteger":
        """
        Десериализация из контракта big_integer.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
            ValueError: Если limbs нарушают инварианты (старший ноль, "-0")
        """
        validate_big_integer(data)
        limbs = list(data["limbs"])
        validate_limbs(limbs)
        if data["negative"] and is_zero_magnitude(limbs):
            raise ValueError("zero must not be marked negative")
        return cls._from_parts(data["negative"], limbs)
