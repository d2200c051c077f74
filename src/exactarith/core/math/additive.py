"""
Additive Engine — сложение и вычитание модулей

Модуль реализует:
- Сложение модулей с переносом (base 10000)
- Вычитание меньшего модуля из большего с заёмом
- Знаковое сложение с разрешением знака результата

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда нормализован
2. Знак нуля всегда сбрасывается (canonical_sign)
3. Входные списки не изменяются
"""

from exactarith.core.math.limbs import BASE, canonical_sign, normalize
from exactarith.core.math.ordering import compare_magnitudes


def add_magnitudes(a: list[int], b: list[int]) -> list[int]:
    """
    Сложение модулей с переносом.

    Длина результата растёт максимум на один limb.

    Examples:
        >>> add_magnitudes([9999, 9999], [1])
        [0, 0, 1]
    """
    if len(a) < len(b):
        a, b = b, a

    result: list[int] = []
    carry = 0
    for index, limb in enumerate(a):
        total = limb + carry
        if index < len(b):
            total += b[index]
        if total >= BASE:
            result.append(total - BASE)
            carry = 1
        else:
            result.append(total)
            carry = 0

    if carry:
        result.append(carry)

    return result


def subtract_magnitudes(a: list[int], b: list[int]) -> tuple[list[int], bool]:
    """
    Вычитание модулей: из большего вычитается меньший.

    Args:
        a: Модуль уменьшаемого
        b: Модуль вычитаемого

    Returns:
        (limbs, flipped):
            - limbs: нормализованный модуль ||a| - |b||
            - flipped: True если |a| < |b| (знак результата надо инвертировать)

    Examples:
        >>> subtract_magnitudes([0, 1], [1])
        ([9999], False)
        >>> subtract_magnitudes([1], [0, 1])
        ([9999], True)
    """
    flipped = compare_magnitudes(a, b) < 0
    larger, smaller = (b, a) if flipped else (a, b)

    result: list[int] = []
    borrow = 0
    for index, limb in enumerate(larger):
        diff = limb - borrow
        if index < len(smaller):
            diff -= smaller[index]
        # Отрицательная разность: занимаем единицу у старшего limb
        if diff < 0:
            result.append(diff + BASE)
            borrow = 1
        else:
            result.append(diff)
            borrow = 0

    return normalize(result), flipped


def signed_add(
    a_negative: bool,
    a: list[int],
    b_negative: bool,
    b: list[int],
) -> tuple[bool, list[int]]:
    """
    Знаковое сложение.

    Одинаковые знаки → сложение модулей с сохранением знака.
    Разные знаки → вычитание модулей, знак определяется flipped.

    Вычитание выражается как signed_add(a_negative, a, not b_negative, b).

    Returns:
        (negative, limbs) с канонизированным знаком
    """
    if a_negative == b_negative:
        limbs = add_magnitudes(a, b)
        return canonical_sign(a_negative, limbs), limbs

    limbs, flipped = subtract_magnitudes(a, b)
    return canonical_sign(a_negative != flipped, limbs), limbs
