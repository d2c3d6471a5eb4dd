"""
Test suite for vecops

Contains:
- tests/unit/          : Unit tests for individual modules
"""
