"""
Test suite

Contains:
- tests/unit/          : Unit and property tests for individual modules
"""
