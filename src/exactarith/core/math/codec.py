"""
Decimal Codec — конверсия строка ⇄ limbs

Модуль обеспечивает:
- Разбор десятичной строки с необязательным ведущим '-'
- Форматирование limbs в минимальную десятичную строку
- Десятичный сдвиг (умножение на 10^k) на уровне упаковки limbs
- Чтение одного токена из текстового потока

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. "-0" (и "-000...") разбирается в канонический неотрицательный ноль
2. Любые символы, кроме одного ведущего '-' и цифр ASCII → InvalidDecimalFormat
3. format_decimal никогда не выдаёт ведущих нулей и "-0"
"""

import re
from typing import Final, TextIO

from exactarith.core.math.limbs import (
    BASE,
    BASE_DIGITS,
    POWERS_OF_10,
    canonical_sign,
    is_zero_magnitude,
    normalize,
)

# Допустимый формат: необязательный '-' и хотя бы одна цифра ASCII
DECIMAL_PATTERN: Final[re.Pattern[str]] = re.compile(r"-?[0-9]+")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidDecimalFormat(ValueError):
    """Строка не является десятичной записью целого числа."""

    pass


# =============================================================================
# РАЗБОР И ФОРМАТИРОВАНИЕ
# =============================================================================


def parse_decimal(text: str) -> tuple[bool, list[int]]:
    """
    Разбор десятичной строки в (negative, limbs).

    Цифры группируются по 4 начиная с младшего конца.
    Пробельные символы по краям игнорируются.

    Args:
        text: Десятичная запись, например "-12345"

    Returns:
        (negative, limbs) в канонической форме

    Raises:
        InvalidDecimalFormat: Если строка не соответствует формату

    Examples:
        >>> parse_decimal("123456789")
        (False, [6789, 2345, 1])
        >>> parse_decimal("-0")
        (False, [0])
    """
    if not isinstance(text, str):
        raise InvalidDecimalFormat(f"decimal text must be a string, got {type(text).__name__}")

    token = text.strip()
    if DECIMAL_PATTERN.fullmatch(token) is None:
        raise InvalidDecimalFormat(f"invalid decimal integer literal: {text!r}")

    negative = token.startswith("-")
    digits = token[1:] if negative else token

    limbs: list[int] = []
    for end in range(len(digits), 0, -BASE_DIGITS):
        start = max(0, end - BASE_DIGITS)
        limbs.append(int(digits[start:end]))

    normalize(limbs)
    return canonical_sign(negative, limbs), limbs


def format_decimal(negative: bool, limbs: list[int]) -> str:
    """
    Минимальная десятичная запись.

    Старший limb без дополнения, остальные дополнены нулями до 4 цифр.
    '-' только для отрицательного ненулевого значения, ноль → "0".

    Examples:
        >>> format_decimal(False, [6789, 2345, 1])
        '123456789'
        >>> format_decimal(True, [7, 0, 1])
        '-100000007'
        >>> format_decimal(True, [0])
        '0'
    """
    text = "".join(str(limb).zfill(BASE_DIGITS) for limb in reversed(limbs)).lstrip("0")
    if not text:
        return "0"
    if negative:
        return "-" + text
    return text


# =============================================================================
# ДЕСЯТИЧНЫЙ СДВИГ
# =============================================================================


def shift_decimal(limbs: list[int], places: int) -> list[int]:
    """
    Умножение модуля на 10^places без полного умножения.

    places // 4 целых нулевых limbs добавляются в младший конец,
    оставшиеся places % 4 цифр сдвигаются внутри limbs с переносом.
    Горячий путь для деления.

    Args:
        limbs: Нормализованный модуль
        places: Количество добавляемых нулевых цифр (>= 0)

    Returns:
        Новый нормализованный список limbs

    Raises:
        ValueError: Если places < 0

    Examples:
        >>> shift_decimal([1234], 3)
        [4000, 123]
        >>> shift_decimal([5], 8)
        [0, 0, 5]
    """
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")

    if is_zero_magnitude(limbs):
        return [0]

    whole, partial = divmod(places, BASE_DIGITS)
    result = [0] * whole

    if partial == 0:
        result.extend(limbs)
        return result

    factor = POWERS_OF_10[partial]
    carry = 0
    for limb in limbs:
        carry, limb_out = divmod(limb * factor + carry, BASE)
        result.append(limb_out)
    if carry:
        result.append(carry)

    return result


# =============================================================================
# ПОТОКОВЫЙ ВВОД
# =============================================================================


def read_token(stream: TextIO) -> str:
    """
    Чтение одного токена, разделённого пробельными символами.

    Ведущие пробельные символы пропускаются, чтение идёт до следующего
    пробельного символа или конца потока (разделитель поглощается).

    Raises:
        EOFError: Если до конца потока не встретилось ни одного символа токена
    """
    chars: list[str] = []
    while True:
        char = stream.read(1)
        if not char:
            break
        if char.isspace():
            if chars:
                break
            continue
        chars.append(char)

    if not chars:
        raise EOFError("no token available in stream")

    return "".join(chars)
