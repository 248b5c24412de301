"""
Test suite for calcmath

Contains:
- tests/unit/          : Unit tests for individual modules
"""
