"""
Test suite for econ

Contains:
- tests/unit/          : Unit tests for individual modules
"""
