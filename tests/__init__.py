"""
Test suite for exactarith

Contains:
- tests/unit/          : Unit tests for engines, value types, settings and contracts
"""
