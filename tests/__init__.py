"""
Test suite for the quantity measurement library

Contains:
- tests/unit/          : Unit tests for individual modules
"""
