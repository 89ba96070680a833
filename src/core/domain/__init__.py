"""
Domain models and value objects.

Contains the immutable calendar values: Date, DateTime and their deltas.
"""

from src.core.domain.date import Date, DateDelta, Weekday
from src.core.domain.date_time import EPOCH, EPOCH_YEAR, DateTime, DateTimeDelta

__all__ = [
    # Date model
    "Date",
    "DateDelta",
    "Weekday",
    # DateTime model
    "DateTime",
    "DateTimeDelta",
    "EPOCH",
    "EPOCH_YEAR",
]
