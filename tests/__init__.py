"""
Test suite for rounding-audit

Contains:
- tests/unit/          : Unit tests for individual modules, CLI and contracts
"""
