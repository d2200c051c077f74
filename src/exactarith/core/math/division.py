"""
Division Engine — деление с усечением и остаток

Длинное деление с оценкой очередной цифры по количеству десятичных цифр
и подбором кратного повторным вычитанием.

Семантика (как decimal.Decimal, НЕ как int):
- Частное усекается к нулю
- Остаток имеет знак делимого (или равен нулю)
- quotient * divisor + remainder == dividend для любого ненулевого делителя

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Делитель ноль → DivisionByZero до входа в цикл
2. На каждой итерации подбирается цифра 1..9 (остаток < 10 * сдвинутый делитель)
3. Знаки результата канонизированы

Стоимость: O(digits^2 * 10) в худшем случае — алгоритм простой и надёжный,
а не быстрый.
"""

import logging

from exactarith.core.math.additive import add_magnitudes, subtract_magnitudes
from exactarith.core.math.codec import shift_decimal
from exactarith.core.math.limbs import (
    canonical_sign,
    digit_count,
    is_zero_magnitude,
    limbs_from_int,
)
from exactarith.core.math.ordering import compare_magnitudes

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DivisionByZero(ZeroDivisionError):
    """Деление или взятие остатка по нулевому делителю."""

    pass


# =============================================================================
# ДЕЛЕНИЕ МОДУЛЕЙ
# =============================================================================


def _probe_multiple(remainder: list[int], step: list[int]) -> tuple[int, list[int]]:
    """
    Подбор наибольшего кратного step (1..9), не превышающего remainder.

    Предусловие: step <= remainder < 10 * step.

    Returns:
        (digit, new_remainder)
    """
    for digit in range(1, 10):
        remainder, _ = subtract_magnitudes(remainder, step)
        if compare_magnitudes(remainder, step) < 0:
            return digit, remainder

    raise AssertionError("quotient digit estimate exceeded 9")


def divmod_magnitudes(dividend: list[int], divisor: list[int]) -> tuple[list[int], list[int]]:
    """
    Длинное деление модулей.

    Алгоритм:
        Пока remainder >= divisor:
        - digits(remainder) == digits(divisor):
            подбор цифры 1..9 для самого делителя
        - digits(remainder) > digits(divisor):
            shift = digits(remainder) - digits(divisor) - 1;
            если remainder >= divisor * 10^(shift + 1), shift увеличивается на 1;
            подбор цифры для divisor * 10^shift, в частное добавляется
            digit * 10^shift

    Args:
        dividend: Модуль делимого
        divisor: Модуль делителя

    Returns:
        (quotient, remainder) — нормализованные модули

    Raises:
        DivisionByZero: Если divisor == 0

    Examples:
        >>> divmod_magnitudes([7], [2])
        ([3], [1])
        >>> divmod_magnitudes([0, 1], [3])  # 10000 / 3
        ([3333], [1])
    """
    if is_zero_magnitude(divisor):
        raise DivisionByZero("division by zero")

    quotient = [0]
    remainder = list(dividend)
    divisor_digits = digit_count(divisor)
    steps = 0

    while compare_magnitudes(remainder, divisor) >= 0:
        remainder_digits = digit_count(remainder)

        if remainder_digits == divisor_digits:
            digit, remainder = _probe_multiple(remainder, divisor)
            quotient = add_magnitudes(quotient, limbs_from_int(digit))
        else:
            shift = remainder_digits - divisor_digits - 1
            shifted = shift_decimal(divisor, shift)
            shifted_again = shift_decimal(shifted, 1)
            if compare_magnitudes(remainder, shifted_again) >= 0:
                shift += 1
                shifted = shifted_again
            digit, remainder = _probe_multiple(remainder, shifted)
            quotient = add_magnitudes(quotient, shift_decimal(limbs_from_int(digit), shift))

        steps += 1

    logger.debug(
        "Long division: %d-digit dividend by %d-digit divisor in %d steps",
        digit_count(dividend),
        divisor_digits,
        steps,
    )
    return quotient, remainder


def divmod_signed(
    a_negative: bool,
    a: list[int],
    b_negative: bool,
    b: list[int],
) -> tuple[tuple[bool, list[int]], tuple[bool, list[int]]]:
    """
    Знаковое деление с усечением к нулю.

    Знак частного = XOR знаков операндов, знак остатка = знак делимого.

    Returns:
        ((quotient_negative, quotient), (remainder_negative, remainder))

    Raises:
        DivisionByZero: Если b == 0

    Examples:
        >>> divmod_signed(True, [7], False, [2])
        ((True, [3]), (True, [1]))
    """
    quotient, remainder = divmod_magnitudes(a, b)
    return (
        (canonical_sign(a_negative != b_negative, quotient), quotient),
        (canonical_sign(a_negative, remainder), remainder),
    )
