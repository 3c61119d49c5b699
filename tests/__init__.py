"""
Test suite for int-titan

Contains:
- tests/unit/          : Unit and property tests for individual modules
"""
