"""
Core value types, arithmetic primitives, and contracts.

This module contains the foundational building blocks of the integer
library: the persistent digit sequence, magnitude arithmetic, the
power-of-two radix codec, and the Integer value model.
"""
