"""
Test suite for planar

Contains:
- tests/unit/          : Unit tests for individual modules
"""
