"""
Test suite for calc_engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""
