"""
Test suite for numeral converter

Contains:
- tests/unit/          : Unit tests for individual modules
"""
