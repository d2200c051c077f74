"""
Contract Validation Module

Валидация JSON контрактов сериализованных значений exactarith.
"""

from .validators import (
    BigIntegerValidator,
    ContractValidator,
    RationalValidator,
    SchemaLoader,
    validate_big_integer,
    validate_rational,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BigIntegerValidator",
    "RationalValidator",
    # Functions
    "validate_big_integer",
    "validate_rational",
]
