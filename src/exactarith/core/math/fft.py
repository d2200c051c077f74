"""
Multiplicative Engine — умножение через FFT-свёртку

Модуль обеспечивает точное умножение модулей через комплексное FFT:
- Длина преобразования — наименьшая степень двойки L >= len(a) + len(b)
- Упаковка: a → вещественный канал, b → мнимый канал одной последовательности
- Одно прямое преобразование, поэлементный квадрат, деление на L,
  обратное преобразование
- Im(p^2) / 2 = свёртка a и b (так как (a + ib)^2 = a^2 - b^2 + 2iab)
- Carry fix-up: округление коэффициентов и перенос в старшие limbs

ЧИСЛЕННЫЙ БЮДЖЕТ ТОЧНОСТИ:
Коэффициенты свёртки достигают L * 9999^2, а Python complex — это float64
(53 бита мантиссы). Точность не бесконечна, поэтому:
1. L > max_transform_length → PrecisionLimitExceeded до начала вычислений
2. |x - round(x)| > rounding_tolerance для любого коэффициента →
   PrecisionLimitExceeded вместо неверных цифр
3. Нулевой операнд не проходит через FFT (шум float не даёт ложных limbs)
"""

import cmath
import logging
import math
from typing import Final

from exactarith.core.math.limbs import BASE, is_zero_magnitude, normalize

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ ТОЧНОСТИ
# =============================================================================

# Максимальная длина преобразования по умолчанию (2^18 limbs ≈ 10^6 цифр)
MAX_TRANSFORM_LENGTH_DEFAULT: Final[int] = 2**18

# Допустимое отклонение сырого коэффициента от ближайшего целого
ROUNDING_TOLERANCE_DEFAULT: Final[float] = 0.25


# =============================================================================
# EXCEPTIONS
# =============================================================================


class PrecisionLimitExceeded(ArithmeticError):
    """
    Превышена ёмкость float64-преобразования.

    Возникает, когда операнды слишком велики для гарантированно точного
    округления коэффициентов свёртки. Это граница ёмкости, а не
    восстанавливаемая ошибка.
    """

    pass


# =============================================================================
# ПРЕОБРАЗОВАНИЕ
# =============================================================================


def transform_length(len_a: int, len_b: int) -> int:
    """
    Наименьшая степень двойки L >= len_a + len_b.

    Examples:
        >>> transform_length(1, 1)
        2
        >>> transform_length(3, 2)
        8
    """
    length = 1
    while length < len_a + len_b:
        length <<= 1
    return length


def build_reversed_bits(length: int) -> list[int]:
    """
    Таблица bit-reversal перестановки для длины length = 2^k.

    Examples:
        >>> build_reversed_bits(8)
        [0, 4, 2, 6, 1, 5, 3, 7]
    """
    bits = length.bit_length() - 1
    reversed_bits = [0] * length
    for i in range(1, length):
        reversed_bits[i] = (reversed_bits[i >> 1] >> 1) | ((i & 1) << (bits - 1))
    return reversed_bits


def fast_fourier_transform(values: list[complex], invert: bool = False) -> None:
    """
    Итеративное FFT (Cooley–Tukey) на месте.

    Корни единицы считаются напрямую через cmath.exp для каждого k
    (без накопления ошибки последовательным умножением).
    Обратное преобразование использует сопряжённые корни и НЕ делит на L.

    Args:
        values: Коэффициенты длины 2^k, изменяются на месте
        invert: True для обратного преобразования
    """
    length = len(values)
    if length & (length - 1):
        raise ValueError(f"transform length must be a power of two, got {length}")

    for i, j in enumerate(build_reversed_bits(length)):
        if i < j:
            values[i], values[j] = values[j], values[i]

    direction = -1.0 if invert else 1.0
    span = 2
    while span <= length:
        half = span // 2
        angle = direction * 2.0 * math.pi / span
        roots = [cmath.exp(1j * angle * k) for k in range(half)]
        for start in range(0, length, span):
            for k in range(half):
                low = start + k
                high = low + half
                mult = roots[k] * values[high]
                values[high] = values[low] - mult
                values[low] = values[low] + mult
        span <<= 1


# =============================================================================
# СВЁРТКА И CARRY FIX-UP
# =============================================================================


def carry_fixup(
    coefficients: list[float],
    rounding_tolerance: float = ROUNDING_TOLERANCE_DEFAULT,
) -> list[int]:
    """
    Округление сырых коэффициентов и перенос в старшие limbs.

    Округление: floor(x + 0.5). Затем каждое значение >= BASE переносится
    в следующий коэффициент, последовательность расширяется, пока старший
    limb не станет меньше BASE.

    Args:
        coefficients: Сырые float-коэффициенты свёртки
        rounding_tolerance: Максимальное |x - round(x)|

    Returns:
        Нормализованные limbs

    Raises:
        PrecisionLimitExceeded: Если ошибка округления превышает допуск
    """
    limbs: list[int] = []
    carry = 0
    worst_error = 0.0
    for index, raw in enumerate(coefficients):
        rounded = math.floor(raw + 0.5)
        error = abs(raw - rounded)
        if error > rounding_tolerance:
            logger.warning(
                "Convolution coefficient #%d = %r deviates by %.4f from an integer",
                index,
                raw,
                error,
            )
            raise PrecisionLimitExceeded(
                f"rounding error {error:.6f} at coefficient #{index} exceeds "
                f"tolerance {rounding_tolerance}"
            )
        worst_error = max(worst_error, error)

        total = rounded + carry
        carry, limb = divmod(total, BASE)
        limbs.append(limb)

    while carry:
        carry, limb = divmod(carry, BASE)
        limbs.append(limb)

    logger.debug("Carry fix-up: %d coefficients, worst rounding error %.3e", len(coefficients), worst_error)
    return normalize(limbs)


def convolve_fft(
    a: list[int],
    b: list[int],
    max_transform_length: int = MAX_TRANSFORM_LENGTH_DEFAULT,
) -> list[float]:
    """
    Линейная свёртка a и b через одно комплексное FFT с упаковкой.

    Args:
        a: Limbs первого операнда
        b: Limbs второго операнда
        max_transform_length: Граница ёмкости преобразования

    Returns:
        Сырые float-коэффициенты свёртки (len(a) + len(b) - 1 штук)

    Raises:
        PrecisionLimitExceeded: Если L > max_transform_length
    """
    length = transform_length(len(a), len(b))
    if length > max_transform_length:
        logger.warning(
            "Transform length %d exceeds capacity %d (operands: %d and %d limbs)",
            length,
            max_transform_length,
            len(a),
            len(b),
        )
        raise PrecisionLimitExceeded(
            f"transform length {length} exceeds max_transform_length {max_transform_length}"
        )

    logger.debug("FFT convolution: %d x %d limbs, transform length %d", len(a), len(b), length)

    packed = [0j] * length
    for index, limb in enumerate(a):
        packed[index] = complex(limb, 0.0)
    for index, limb in enumerate(b):
        packed[index] = complex(packed[index].real, limb)

    fast_fourier_transform(packed)
    for index in range(length):
        value = packed[index]
        packed[index] = value * value / length
    fast_fourier_transform(packed, invert=True)

    return [packed[index].imag / 2.0 for index in range(len(a) + len(b) - 1)]


def convolve_direct(a: list[int], b: list[int]) -> list[int]:
    """
    Schoolbook-свёртка O(n^2) — эталон для сверки с FFT.

    Examples:
        >>> convolve_direct([1, 2], [3, 4])
        [3, 10, 8]
    """
    result = [0] * (len(a) + len(b) - 1)
    for i, x in enumerate(a):
        if x == 0:
            continue
        for j, y in enumerate(b):
            result[i + j] += x * y
    return result


def multiply_magnitudes(
    a: list[int],
    b: list[int],
    max_transform_length: int = MAX_TRANSFORM_LENGTH_DEFAULT,
    rounding_tolerance: float = ROUNDING_TOLERANCE_DEFAULT,
) -> list[int]:
    """
    Точное произведение модулей.

    Нулевой операнд → [0] без запуска преобразования.

    Raises:
        PrecisionLimitExceeded: При выходе за границу ёмкости

    Examples:
        >>> multiply_magnitudes([0, 0, 0, 1], [9999, 9999, 9999])
        [0, 0, 0, 9999, 9999, 9999]
    """
    if is_zero_magnitude(a) or is_zero_magnitude(b):
        return [0]

    coefficients = convolve_fft(a, b, max_transform_length=max_transform_length)
    return carry_fixup(coefficients, rounding_tolerance=rounding_tolerance)
