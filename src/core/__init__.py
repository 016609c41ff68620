"""
Core value types and integer primitives.

This module contains the Fraction value type and the factor helpers it is
built on. Nothing here performs I/O or depends on the demo driver.
"""
