"""
Core math modules для Fraction

Целочисленные примитивы (НОД, НОК), на которых строится каноническая форма.
"""

# Factors (НОД / НОК)
from src.core.math.factors import (
    greatest_common_factor,
    least_common_multiple,
)

__all__ = [
    # Factors
    "greatest_common_factor",
    "least_common_multiple",
]
