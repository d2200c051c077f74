"""
Core math modules для exactarith

Движки точной арифметики над limbs (base 10000).
"""

# Limb Store
from exactarith.core.math.limbs import (
    BASE,
    BASE_DIGITS,
    canonical_sign,
    digit_count,
    is_zero_magnitude,
    limbs_from_int,
    normalize,
    validate_limbs,
)

# Ordering
from exactarith.core.math.ordering import compare_magnitudes, compare_signed

# Additive Engine
from exactarith.core.math.additive import add_magnitudes, signed_add, subtract_magnitudes

# Multiplicative Engine
from exactarith.core.math.fft import (
    MAX_TRANSFORM_LENGTH_DEFAULT,
    ROUNDING_TOLERANCE_DEFAULT,
    PrecisionLimitExceeded,
    build_reversed_bits,
    carry_fixup,
    convolve_direct,
    convolve_fft,
    fast_fourier_transform,
    multiply_magnitudes,
    transform_length,
)

# Decimal Codec
from exactarith.core.math.codec import (
    InvalidDecimalFormat,
    format_decimal,
    parse_decimal,
    read_token,
    shift_decimal,
)

# Division Engine
from exactarith.core.math.division import DivisionByZero, divmod_magnitudes, divmod_signed

__all__ = [
    # Limb Store
    "BASE",
    "BASE_DIGITS",
    "canonical_sign",
    "digit_count",
    "is_zero_magnitude",
    "limbs_from_int",
    "normalize",
    "validate_limbs",
    # Ordering
    "compare_magnitudes",
    "compare_signed",
    # Additive Engine
    "add_magnitudes",
    "signed_add",
    "subtract_magnitudes",
    # Multiplicative Engine — Constants
    "MAX_TRANSFORM_LENGTH_DEFAULT",
    "ROUNDING_TOLERANCE_DEFAULT",
    # Multiplicative Engine — Exceptions
    "PrecisionLimitExceeded",
    # Multiplicative Engine — Functions
    "build_reversed_bits",
    "carry_fixup",
    "convolve_direct",
    "convolve_fft",
    "fast_fourier_transform",
    "multiply_magnitudes",
    "transform_length",
    # Decimal Codec
    "InvalidDecimalFormat",
    "format_decimal",
    "parse_decimal",
    "read_token",
    "shift_decimal",
    # Division Engine
    "DivisionByZero",
    "divmod_magnitudes",
    "divmod_signed",
]
