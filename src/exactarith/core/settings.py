"""
ArithmeticSettings — конфигурация арифметического ядра

Immutable Pydantic модель с ограничениями параметров точности.
Активные настройки читаются BigInteger при каждом умножении и
Rational при конверсии в float.
"""

from pydantic import BaseModel, Field, field_validator

from exactarith.core.math.fft import MAX_TRANSFORM_LENGTH_DEFAULT, ROUNDING_TOLERANCE_DEFAULT

# Количество дробных цифр для float(Rational) по умолчанию
RATIONAL_FLOAT_PRECISION_DEFAULT = 12


class ArithmeticSettings(BaseModel):
    """
    Параметры точности и ёмкости.

    Attributes:
        max_transform_length: Граница ёмкости FFT (степень двойки)
        rounding_tolerance: Допуск ошибки округления коэффициента свёртки
        rational_float_precision: Дробные цифры при float(Rational)
    """

    max_transform_length: int = Field(
        default=MAX_TRANSFORM_LENGTH_DEFAULT,
        ge=2,
        description="Максимальная длина FFT-преобразования",
    )
    rounding_tolerance: float = Field(
        default=ROUNDING_TOLERANCE_DEFAULT,
        gt=0,
        lt=0.5,
        description="Допустимое |x - round(x)| коэффициента свёртки",
    )
    rational_float_precision: int = Field(
        default=RATIONAL_FLOAT_PRECISION_DEFAULT,
        ge=0,
        description="Количество дробных цифр для float(Rational)",
    )

    model_config = {"frozen": True}

    @field_validator("max_transform_length")
    @classmethod
    def validate_power_of_two(cls, v: int) -> int:
        """Длина преобразования обязана быть степенью двойки"""
        if v & (v - 1):
            raise ValueError(f"max_transform_length must be a power of two, got {v}")
        return v


_ACTIVE_SETTINGS = ArithmeticSettings()


def get_settings() -> ArithmeticSettings:
    """Текущие активные настройки."""
    return _ACTIVE_SETTINGS


def configure(**overrides) -> ArithmeticSettings:
    """
    Замена активных настроек с валидацией.

    Args:
        **overrides: Поля ArithmeticSettings для замены

    Returns:
        Новые активные настройки

    Raises:
        pydantic.ValidationError: Если значения нарушают ограничения
    """
    global _ACTIVE_SETTINGS
    _ACTIVE_SETTINGS = ArithmeticSettings(**{**_ACTIVE_SETTINGS.model_dump(), **overrides})
    return _ACTIVE_SETTINGS


def reset_settings() -> ArithmeticSettings:
    """Возврат к настройкам по умолчанию."""
    global _ACTIVE_SETTINGS
    _ACTIVE_SETTINGS = ArithmeticSettings()
    return _ACTIVE_SETTINGS
