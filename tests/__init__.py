"""
Test suite for karatsuba-digits

Contains:
- tests/unit/          : Unit tests for individual modules
"""
