"""Эталонные функции для property-проверок на Python int."""

import random


def random_int(rng: random.Random, max_digits: int) -> int:
    """Случайное знаковое целое с 1..max_digits цифрами."""
    digits = rng.randint(1, max_digits)
    low = 10 ** (digits - 1) if digits > 1 else 0
    value = rng.randrange(low, 10**digits)
    return -value if rng.random() < 0.5 else value


def truncating_divmod(a: int, b: int) -> tuple[int, int]:
    """Частное с усечением к нулю, остаток со знаком делимого."""
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b
