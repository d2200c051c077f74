"""
Limb Store — каноническое представление модуля числа

Модуль описывает хранение модуля целого числа в виде little-endian
последовательности limbs (групп по 4 десятичные цифры, base = 10000):
- Нормализация (удаление старших нулевых limbs)
- Канонизация знака нуля
- Подсчёт десятичных цифр
- Конверсия из Python int

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. len(limbs) >= 1 всегда
2. Нет старших нулевых limbs, кроме единственного limb нуля
3. Ноль всегда неотрицательный (знак сбрасывается через canonical_sign)
4. Каждый limb в диапазоне [0, BASE - 1]
"""

from typing import Final

# =============================================================================
# КОНСТАНТЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Основание одного limb
BASE: Final[int] = 10_000

# Количество десятичных цифр в одном limb
BASE_DIGITS: Final[int] = 4

# Степени 10 внутри одного limb (10^0 .. 10^BASE_DIGITS)
POWERS_OF_10: Final[tuple[int, ...]] = tuple(10**k for k in range(BASE_DIGITS + 1))


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize(limbs: list[int]) -> list[int]:
    """
    Удаление старших нулевых limbs (in place).

    Минимальная длина результата — 1 (ноль хранится как [0]).

    Args:
        limbs: Последовательность limbs (little-endian), изменяется на месте

    Returns:
        Тот же список после нормализации

    Examples:
        >>> normalize([5, 0, 0])
        [5]
        >>> normalize([0, 0])
        [0]
    """
    if not limbs:
        limbs.append(0)
        return limbs

    while len(limbs) > 1 and limbs[-1] == 0:
        limbs.pop()

    return limbs


def is_zero_magnitude(limbs: list[int]) -> bool:
    """Проверка, что нормализованный модуль равен нулю."""
    return len(limbs) == 1 and limbs[0] == 0


def canonical_sign(negative: bool, limbs: list[int]) -> bool:
    """
    Единственная точка восстановления инварианта знака нуля.

    Вызывается в конце каждой операции, создающей значение.

    Args:
        negative: Знак, полученный в ходе операции
        limbs: Нормализованный модуль результата

    Returns:
        False для нулевого модуля, иначе negative
    """
    if is_zero_magnitude(limbs):
        return False
    return negative


# =============================================================================
# ЦИФРЫ И КОНВЕРСИИ
# =============================================================================


def digit_count(limbs: list[int]) -> int:
    """
    Количество десятичных цифр нормализованного модуля.

    Ноль имеет одну цифру.

    Examples:
        >>> digit_count([0])
        1
        >>> digit_count([0, 1])  # 10000
        5
        >>> digit_count([9999, 999])  # 9999999
        7
    """
    top = limbs[-1]
    top_digits = 1
    while top_digits < BASE_DIGITS and top >= POWERS_OF_10[top_digits]:
        top_digits += 1
    return BASE_DIGITS * (len(limbs) - 1) + top_digits


def limbs_from_int(value: int) -> list[int]:
    """
    Модуль Python int в виде limbs.

    Args:
        value: Любое целое (знак игнорируется)

    Returns:
        Нормализованная последовательность limbs

    Examples:
        >>> limbs_from_int(123456789)
        [6789, 2345, 1]
        >>> limbs_from_int(-5)
        [5]
    """
    value = abs(value)
    limbs: list[int] = []
    while True:
        value, limb = divmod(value, BASE)
        limbs.append(limb)
        if value == 0:
            break
    return limbs


def validate_limbs(limbs: list[int]) -> None:
    """
    Проверка settled-инвариантов последовательности limbs.

    Используется при десериализации внешних данных.

    Raises:
        ValueError: Если последовательность пустая, содержит limb вне
            [0, BASE - 1] или старший нулевой limb
    """
    if not limbs:
        raise ValueError("limbs must contain at least one limb")

    for index, limb in enumerate(limbs):
        if not isinstance(limb, int) or isinstance(limb, bool):
            raise ValueError(f"limb #{index} must be an integer, got {limb!r}")
        if limb < 0 or limb >= BASE:
            raise ValueError(f"limb #{index} must be in [0, {BASE - 1}], got {limb}")

    if len(limbs) > 1 and limbs[-1] == 0:
        raise ValueError("limbs must not have a trailing zero limb")
