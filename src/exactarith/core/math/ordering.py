"""
Ordering — трёхзначное сравнение значений

Сравнение работает только с нормализованными limbs:
больше limbs ⇒ больше модуль.

Согласованность с арифметикой:
- a == a для любого a
- a < b ⇒ -a > -b
"""


def compare_magnitudes(a: list[int], b: list[int]) -> int:
    """
    Сравнение модулей.

    Args:
        a: Нормализованные limbs первого операнда
        b: Нормализованные limbs второго операнда

    Returns:
        -1 если |a| < |b|, 0 если равны, +1 если |a| > |b|
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    for index in range(len(a) - 1, -1, -1):
        if a[index] != b[index]:
            return -1 if a[index] < b[index] else 1

    return 0


def compare_signed(a_negative: bool, a: list[int], b_negative: bool, b: list[int]) -> int:
    """
    Сравнение знаковых значений.

    Алгоритм:
        1. Разные знаки → больше неотрицательное значение
        2. Одинаковые знаки → сравнение модулей
        3. Для отрицательных результат сравнения модулей инвертируется

    Returns:
        -1, 0 или +1

    Examples:
        >>> compare_signed(True, [5], False, [3])
        -1
        >>> compare_signed(True, [5], True, [3])
        -1
        >>> compare_signed(False, [7], False, [7])
        0
    """
    if a_negative != b_negative:
        return -1 if a_negative else 1

    result = compare_magnitudes(a, b)
    return -result if a_negative else result
