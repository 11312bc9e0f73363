"""
Test suite for shift-laminations

Contains:
- tests/unit/          : Unit tests for individual modules and end-to-end lamination scenarios
"""
