"""
Test suite for digitwise

Contains:
- tests/unit/          : Unit tests for individual modules
"""
