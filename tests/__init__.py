"""
Test suite for token-policy-engine

Contains:
- tests/unit/          : Unit tests for individual modules and engine scenarios
"""
