"""
Core math modules

Целочисленные календарные алгоритмы без зависимостей от доменных моделей.
"""

# Integer Safeguards
from src.core.math.integer_safeguards import (
    clamp_int,
    is_plain_int,
    is_in_range,
    trunc_div,
)

# Gregorian (Date engine)
from src.core.math.gregorian import (
    DAYS_PER_400_YEARS,
    MAX_DAY,
    MIN_DAY,
    MONTH_LENGTHS,
    MONTHS_PER_YEAR,
    clamp_date,
    date_from_days,
    day_of_week_index,
    days_from_year,
    days_from_year_month,
    days_from_year_month_day,
    days_in_month,
    is_leap_year,
    is_valid_date,
    shift_year_month,
    unsafe_days_in_month,
)

# Clock Offset (Clock-offset engine)
from src.core.math.clock_offset import (
    DAY_MS,
    HOUR_MS,
    MINUTE_MS,
    SECOND_MS,
    carry_milliseconds,
    offset_from_fields,
    offset_hour,
    offset_millisecond,
    offset_minute,
    offset_second,
)

__all__ = [
    # Integer Safeguards
    "clamp_int",
    "is_plain_int",
    "is_in_range",
    "trunc_div",
    # Gregorian — Constants
    "DAYS_PER_400_YEARS",
    "MAX_DAY",
    "MIN_DAY",
    "MONTH_LENGTHS",
    "MONTHS_PER_YEAR",
    # Gregorian — Functions
    "clamp_date",
    "date_from_days",
    "day_of_week_index",
    "days_from_year",
    "days_from_year_month",
    "days_from_year_month_day",
    "days_in_month",
    "is_leap_year",
    "is_valid_date",
    "shift_year_month",
    "unsafe_days_in_month",
    # Clock Offset — Constants
    "DAY_MS",
    "HOUR_MS",
    "MINUTE_MS",
    "SECOND_MS",
    # Clock Offset — Functions
    "carry_milliseconds",
    "offset_from_fields",
    "offset_hour",
    "offset_millisecond",
    "offset_minute",
    "offset_second",
]
