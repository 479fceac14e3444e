"""
Test suite for CalcBigInt

Contains:
- tests/unit/          : Unit and property tests for individual modules
"""
