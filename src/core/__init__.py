"""
Core calendar arithmetic: integer algorithms and immutable value objects.

This module contains the foundational building blocks that are independent
of formatting, parsing, timezones and wall-clock acquisition.
"""
