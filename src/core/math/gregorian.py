"""
Gregorian — арифметика пролептического григорианского календаря

Модуль содержит всю календарную математику, на которую опираются
доменные модели Date и DateTime:
- Правило високосного года и таблица длин месяцев
- Проверка валидности даты (единственный способ обнаружить невалидный ввод)
- Политика clamp-and-repair для построения даты из любых трёх целых
- День недели по алгоритму Сакамото
- Биекция (year, month, day) <-> линейный счётчик дней
- Сдвиг (year, month) на произвольное число месяцев

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. date_from_days(days_from_year_month_day(y, m, d)) == (y, m, d)
   для любой валидной даты, включая y <= 0
2. Год 0 существует и является високосным (пролептическое продолжение)
3. Везде используется floor-деление (// и % в Python), в том числе
   для отрицательных годов
4. Ни одна функция не выбрасывает исключение; отсутствие результата
   сообщается через None только в days_in_month

ОТСЧЁТ ДНЕЙ:
    День 0 — 1 января года 0.
    days_from_year(y) = число дней от дня 0 до 1 января года y
    (отрицательное для y < 0).
"""

from typing import Final

from src.core.math.integer_safeguards import clamp_int, is_in_range

# =============================================================================
# КАЛЕНДАРНЫЕ КОНСТАНТЫ
# =============================================================================

MONTHS_PER_YEAR: Final[int] = 12

# Границы clamp для дня до repair-каскада
MIN_DAY: Final[int] = 1
MAX_DAY: Final[int] = 31

# Любой день <= 28 валиден в любом месяце любого года
MIN_MONTH_LENGTH: Final[int] = 28

DAYS_PER_YEAR: Final[int] = 365

# Григорианский цикл високосных лет повторяется ровно каждые 400 лет
YEARS_PER_CYCLE: Final[int] = 400
DAYS_PER_400_YEARS: Final[int] = 146_097

# Длины месяцев невисокосного года (январь..декабрь)
MONTH_LENGTHS: Final[tuple[int, ...]] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Смещения месяцев для алгоритма Сакамото (январь..декабрь)
SAKAMOTO_MONTH_OFFSETS: Final[tuple[int, ...]] = (0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)

# Максимальное число шагов repair-каскада: 31 -> 28
MAX_REPAIR_STEPS: Final[int] = MAX_DAY - MIN_MONTH_LENGTH


# =============================================================================
# ВИСОКОСНЫЙ ГОД И ДЛИНА МЕСЯЦА
# =============================================================================


def is_leap_year(year: int) -> bool:
    """
    Правило високосного года.

    Год високосный, если делится на 400, либо делится на 4 и не делится на 100.

    Examples:
        >>> is_leap_year(2016)
        True
        >>> is_leap_year(1900)
        False
        >>> is_leap_year(0)
        True
    """
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


def unsafe_days_in_month(year: int, month: int) -> int:
    """
    Длина месяца без проверки номера месяца.

    Вызывающий код гарантирует 1 <= month <= 12.
    """
    if month == 2 and is_leap_year(year):
        return 29
    return MONTH_LENGTHS[month - 1]


def days_in_month(year: int, month: int) -> int | None:
    """
    Длина месяца с явным отсутствием результата.

    Args:
        year: Год (любой знак)
        month: Номер месяца

    Returns:
        Число дней в месяце, либо None, если month вне 1..12
        (у такого запроса нет разумного ближайшего значения)

    Examples:
        >>> days_in_month(2016, 2)
        29
        >>> days_in_month(2018, 13) is None
        True
    """
    if not is_in_range(month, 1, MONTHS_PER_YEAR):
        return None
    return unsafe_days_in_month(year, month)


def is_valid_date(year: int, month: int, day: int) -> bool:
    """
    Проверка, что (year, month, day) — существующая календарная дата.

    Построение Date никогда не сообщает об ошибке; это единственный способ
    обнаружить невалидный ввод.

    Examples:
        >>> is_valid_date(2016, 2, 29)
        True
        >>> is_valid_date(2018, 2, 29)
        False
        >>> is_valid_date(2016, 12, 32)
        False
    """
    month_length = days_in_month(year, month)
    if month_length is None:
        return False
    return is_in_range(day, MIN_DAY, month_length)


# =============================================================================
# CLAMP-AND-REPAIR
# =============================================================================


def clamp_date(year: int, month: int, day: int) -> tuple[int, int, int]:
    """
    Построение валидной даты из любых трёх целых.

    Порядок политики фиксирован:
    1. month ограничивается диапазоном [1, 12]
    2. day ограничивается диапазоном [1, 31]
    3. при фиксированных year и month проверяются day, day-1, day-2, day-3;
       принимается первая валидная тройка

    Args:
        year: Год (не ограничивается)
        month: Месяц (любое целое)
        day: День (любое целое)

    Returns:
        Валидная тройка (year, month, day)

    Examples:
        >>> clamp_date(2018, 2, 31)
        (2018, 2, 28)
        >>> clamp_date(2016, 14, 0)
        (2016, 12, 1)
    """
    month = clamp_int(month, 1, MONTHS_PER_YEAR)
    day = clamp_int(day, MIN_DAY, MAX_DAY)

    for step in range(MAX_REPAIR_STEPS + 1):
        if is_valid_date(year, month, day - step):
            return (year, month, day - step)

    # Недостижимо: день <= 28 валиден всегда
    return (year, month, MIN_MONTH_LENGTH)


# =============================================================================
# ДЕНЬ НЕДЕЛИ
# =============================================================================


def day_of_week_index(year: int, month: int, day: int) -> int:
    """
    День недели по алгоритму Сакамото.

    Для января и февраля используется предыдущий год (только в формуле).
    Деление и остаток — floor, поэтому формула верна и для отрицательных лет.

    Returns:
        0..6, где 0 — воскресенье, 6 — суббота

    Examples:
        >>> day_of_week_index(2018, 5, 26)
        6
    """
    y = year - 1 if month < 3 else year
    return (
        y + y // 4 - y // 100 + y // 400 + SAKAMOTO_MONTH_OFFSETS[month - 1] + day
    ) % 7


# =============================================================================
# СЧЁТЧИК ДНЕЙ
# =============================================================================


def days_from_year(year: int) -> int:
    """
    Число дней от 1 января года 0 до 1 января года year.

    Три ветви: year > 0, year < 0 и year == 0 (ровно 0).
    Год 0 високосный, поэтому для year > 0 он входит в счёт.
    """
    if year > 0:
        previous = year - 1
        leap_days = previous // 4 - previous // 100 + previous // 400 + 1
        return DAYS_PER_YEAR * year + leap_days
    if year < 0:
        # Високосные годы в [year, -1]
        span = -year
        leap_days = span // 4 - span // 100 + span // 400
        return -(DAYS_PER_YEAR * span + leap_days)
    return 0


def days_from_year_month(year: int, month: int) -> int:
    """Число дней от 1 января года year до 1-го числа месяца month."""
    return sum(unsafe_days_in_month(year, m) for m in range(1, month))


def days_from_year_month_day(year: int, month: int, day: int) -> int:
    """
    Линейный счётчик дней валидной даты.

    Examples:
        >>> days_from_year_month_day(0, 1, 1)
        0
        >>> days_from_year_month_day(-1, 12, 31)
        -1
    """
    return days_from_year(year) + days_from_year_month(year, month) + day - 1


def date_from_days(days: int) -> tuple[int, int, int]:
    """
    Обратное преобразование: счётчик дней -> (year, month, day).

    Алгоритм:
    1. Нормализация по длине 400-летнего цикла (floor divmod)
    2. Оценка года внутри цикла через // 365 с коррекцией на один год,
       если оценка перескочила (лишних високосных дней в цикле < 365)
    3. Поиск месяца по накопленным длинам месяцев, день — остаток

    Каждому целому соответствует ровно одна валидная дата, repair не нужен.

    Examples:
        >>> date_from_days(0)
        (0, 1, 1)
        >>> date_from_days(-1)
        (-1, 12, 31)
    """
    cycles, day_in_cycle = divmod(days, DAYS_PER_400_YEARS)

    year_in_cycle = day_in_cycle // DAYS_PER_YEAR
    if days_from_year(year_in_cycle) > day_in_cycle:
        year_in_cycle -= 1

    year = cycles * YEARS_PER_CYCLE + year_in_cycle
    remaining = day_in_cycle - days_from_year(year_in_cycle)

    month = 1
    while month < MONTHS_PER_YEAR:
        month_length = unsafe_days_in_month(year, month)
        if remaining < month_length:
            break
        remaining -= month_length
        month += 1

    return (year, month, remaining + 1)


# =============================================================================
# СДВИГ МЕСЯЦЕВ
# =============================================================================


def shift_year_month(year: int, month: int, months: int) -> tuple[int, int]:
    """
    Сдвиг (year, month) на months месяцев.

    (year, month) переводится в счётчик месяцев с нуля, к нему прибавляется
    сдвиг, результат раскладывается floor-делением на 12.

    Examples:
        >>> shift_year_month(2018, 3, -1)
        (2018, 2)
        >>> shift_year_month(2018, 1, -1)
        (2017, 12)
        >>> shift_year_month(0, 1, -13)
        (-2, 12)
    """
    total_months = year * MONTHS_PER_YEAR + (month - 1) + months
    new_year, month_index = divmod(total_months, MONTHS_PER_YEAR)
    return (new_year, month_index + 1)
