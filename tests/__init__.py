"""
Test suite for the calendar arithmetic core

Contains:
- tests/unit/          : Unit and property-based tests for individual modules
"""
