"""
Domain models and value objects.

Contains the arbitrary-precision Integer value and its operations.
"""

from src.core.domain.integer import (
    Integer,
    add,
    compare,
    from_digits,
    from_int,
    from_text,
    is_less_than,
    negate,
    subtract,
    to_text,
)

__all__ = [
    # Model
    "Integer",
    # Factories
    "from_digits",
    "from_int",
    "from_text",
    "to_text",
    # Arithmetic
    "negate",
    "add",
    "subtract",
    # Comparison
    "is_less_than",
    "compare",
]
