"""
Test suite for VAT Register

Contains:
- tests/unit/          : Unit tests for individual modules
"""
