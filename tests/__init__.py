"""
Test suite for Gold2BTC

Contains:
- tests/unit/          : Unit tests for individual modules
"""
