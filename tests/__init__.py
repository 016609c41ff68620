"""
Test suite for fraction-core

Contains:
- tests/unit/          : Unit tests for factors, Fraction and the demo driver
"""
