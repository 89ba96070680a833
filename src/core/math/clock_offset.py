"""
Clock Offset — миллисекундное смещение внутри суток

Смещение (offset) — число миллисекунд, прошедших с полуночи даты.
Инвариант в устойчивом состоянии: 0 <= offset < DAY_MS.

Модуль содержит:
- Константы единиц времени в миллисекундах
- Упаковку (hour, minute, second, millisecond) в offset с независимым clamp полей
- Извлечение полей из offset через вложенную цепочку остатков
- Примитив переноса (carry): offset + delta -> (extra_days, new_offset)

Перенос реализован в одном месте; add_hours/add_minutes/add_seconds
в доменной модели — только конверсия единиц в миллисекунды.
"""

from typing import Final

from src.core.math.integer_safeguards import clamp_int

# =============================================================================
# ЕДИНИЦЫ ВРЕМЕНИ (миллисекунды)
# =============================================================================

SECOND_MS: Final[int] = 1_000
MINUTE_MS: Final[int] = 60 * SECOND_MS
HOUR_MS: Final[int] = 60 * MINUTE_MS
DAY_MS: Final[int] = 24 * HOUR_MS

# Допустимые диапазоны полей времени (включительно)
MAX_HOUR: Final[int] = 23
MAX_MINUTE: Final[int] = 59
MAX_SECOND: Final[int] = 59
MAX_MILLISECOND: Final[int] = 999


# =============================================================================
# УПАКОВКА И ИЗВЛЕЧЕНИЕ ПОЛЕЙ
# =============================================================================


def offset_from_fields(
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> int:
    """
    Построение offset из полей времени.

    Каждое поле ограничивается своим диапазоном независимо
    (hour 0..23, minute/second 0..59, millisecond 0..999), поэтому
    результат всегда лежит в [0, DAY_MS).

    Examples:
        >>> offset_from_fields(1, 2, 3, 4)
        3723004
        >>> offset_from_fields(25, -1, 60, 1000)
        82859999
    """
    return (
        clamp_int(hour, 0, MAX_HOUR) * HOUR_MS
        + clamp_int(minute, 0, MAX_MINUTE) * MINUTE_MS
        + clamp_int(second, 0, MAX_SECOND) * SECOND_MS
        + clamp_int(millisecond, 0, MAX_MILLISECOND)
    )


def offset_hour(offset: int) -> int:
    """Час: offset // HOUR_MS."""
    return offset // HOUR_MS


def offset_minute(offset: int) -> int:
    """Минута: (offset % HOUR_MS) // MINUTE_MS."""
    return (offset % HOUR_MS) // MINUTE_MS


def offset_second(offset: int) -> int:
    """Секунда: (offset % HOUR_MS % MINUTE_MS) // SECOND_MS."""
    return (offset % HOUR_MS % MINUTE_MS) // SECOND_MS


def offset_millisecond(offset: int) -> int:
    """Миллисекунда: offset % HOUR_MS % MINUTE_MS % SECOND_MS."""
    return offset % HOUR_MS % MINUTE_MS % SECOND_MS


# =============================================================================
# ПЕРЕНОС (CARRY)
# =============================================================================


def carry_milliseconds(offset: int, milliseconds: int) -> tuple[int, int]:
    """
    Прибавление знаковой дельты к offset с переносом в дни.

    total = offset + milliseconds
    - total >= 0: extra_days = total // DAY_MS, new_offset = total % DAY_MS
    - total < 0: число целых отрицательных суток считается по модулю total
      и меняет знак; неполные сутки добавляют ещё один день переноса.
      Ровно кратное -DAY_MS даёт new_offset == 0 без лишнего дня.

    Args:
        offset: Текущее смещение (обычно в [0, DAY_MS))
        milliseconds: Знаковая дельта

    Returns:
        (extra_days, new_offset), где 0 <= new_offset < DAY_MS

    Examples:
        >>> carry_milliseconds(0, -86_400_000)
        (-1, 0)
        >>> carry_milliseconds(0, -1)
        (-1, 86399999)
        >>> carry_milliseconds(86_399_999, 1)
        (1, 0)
    """
    total = offset + milliseconds

    if total >= 0:
        return divmod(total, DAY_MS)

    whole_days, remainder = divmod(-total, DAY_MS)
    if remainder == 0:
        return (-whole_days, 0)
    return (-whole_days - 1, DAY_MS - remainder)
