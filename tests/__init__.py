"""
Test suite for radixconv

Contains:
- tests/unit/          : Unit tests for individual modules
"""
