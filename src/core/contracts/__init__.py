"""
Contract Validation Module

Модуль для валидации JSON контрактов конвертера систем счисления.
"""

from .validators import (
    ContractValidator,
    NumeralValidator,
    SchemaLoader,
    validate_encoded_numeral,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "NumeralValidator",
    # Functions
    "validate_encoded_numeral",
]
