"""
Test suite for cldr-decimal-math

Contains:
- tests/unit/          : Unit tests for the src.core.math kernel modules
"""
