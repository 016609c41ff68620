"""
Domain models and value objects.

Contains the Fraction value type and its explicit operations.
"""

from src.core.domain.fraction import (
    HASH_MULTIPLIER,
    ZERO,
    Fraction,
    FractionDivisionByZero,
    FractionResult,
    compare,
    equals,
    normalize,
    to_display,
    try_construct,
    try_divide,
)

__all__ = [
    # Constants
    "HASH_MULTIPLIER",
    "ZERO",
    # Fraction model
    "Fraction",
    "FractionDivisionByZero",
    "FractionResult",
    # Explicit operations
    "compare",
    "equals",
    "normalize",
    "to_display",
    "try_construct",
    "try_divide",
]
