"""
Contract Validation Module

Модуль для валидации JSON контракта сериализованного Integer.
"""

from .validators import (
    ContractValidator,
    IntegerContractValidator,
    SchemaLoader,
    integer_from_payload,
    integer_to_payload,
    validate_integer_payload,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "IntegerContractValidator",
    # Functions
    "validate_integer_payload",
    "integer_to_payload",
    "integer_from_payload",
]
