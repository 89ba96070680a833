"""
Тесты для Gregorian — арифметика пролептического григорианского календаря

Проверяет:
1. Правило високосного года на известных годах
2. Длину месяца и явное отсутствие результата для месяца вне 1..12
3. Валидацию дат
4. Политику clamp-and-repair
5. День недели (Сакамото), включая год 0
6. Биекцию дата <-> счётчик дней, включая y <= 0 и границу 400-летнего цикла
7. Сдвиг месяцев с floor-делением
"""

import pytest

from src.core.math.gregorian import (
    DAYS_PER_400_YEARS,
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


# =============================================================================
# ВИСОКОСНЫЙ ГОД И ДЛИНА МЕСЯЦА
# =============================================================================


class TestIsLeapYear:
    """Тесты правила високосного года"""

    @pytest.mark.parametrize(
        "year,expected",
        [
            (2016, True),
            (2018, False),
            (400, True),
            (500, False),
            (504, True),
            (1900, False),
            (2000, True),
            (0, True),
            (-4, True),
            (-100, False),
            (-400, True),
        ],
    )
    def test_known_years(self, year: int, expected: bool) -> None:
        """Известные високосные и невисокосные годы"""
        assert is_leap_year(year) is expected

    def test_matches_rule_over_range(self) -> None:
        """Совпадение с формулой на диапазоне лет, включая отрицательные"""
        for year in range(-1000, 3000):
            expected = (year % 400 == 0) or (year % 4 == 0 and year % 100 != 0)
            assert is_leap_year(year) is expected


class TestDaysInMonth:
    """Тесты длины месяца"""

    def test_february_leap(self) -> None:
        """Февраль високосного года — 29 дней"""
        assert days_in_month(2016, 2) == 29

    def test_february_non_leap(self) -> None:
        """Февраль обычного года — 28 дней"""
        assert days_in_month(2018, 2) == 28

    def test_thirty_day_months(self) -> None:
        """Апрель, июнь, сентябрь, ноябрь — 30 дней"""
        for month in (4, 6, 9, 11):
            assert days_in_month(2018, month) == 30

    def test_year_total(self) -> None:
        """Сумма длин месяцев равна длине года"""
        assert sum(days_in_month(2018, m) for m in range(1, 13)) == 365
        assert sum(days_in_month(2016, m) for m in range(1, 13)) == 366

    @pytest.mark.parametrize("month", [0, 13, -1, 100])
    def test_invalid_month_is_absent(self, month: int) -> None:
        """Месяц вне 1..12 даёт None, а не число"""
        assert days_in_month(2018, month) is None

    def test_unsafe_matches_checked(self) -> None:
        """unsafe_days_in_month совпадает с days_in_month для валидных месяцев"""
        for month in range(1, 13):
            assert unsafe_days_in_month(2016, month) == days_in_month(2016, month)


class TestIsValidDate:
    """Тесты валидации даты"""

    def test_leap_day_valid_in_leap_year(self) -> None:
        assert is_valid_date(2016, 2, 29) is True

    def test_leap_day_invalid_in_common_year(self) -> None:
        assert is_valid_date(2018, 2, 29) is False

    def test_day_beyond_month(self) -> None:
        assert is_valid_date(2016, 12, 32) is False

    def test_zero_and_negative_fields(self) -> None:
        """День и месяц 0 или отрицательные невалидны"""
        assert is_valid_date(2016, 1, 0) is False
        assert is_valid_date(2016, 0, 1) is False
        assert is_valid_date(2016, -1, 1) is False

    def test_year_zero_and_negative(self) -> None:
        """Год не ограничен: год 0 и отрицательные годы валидны"""
        assert is_valid_date(0, 2, 29) is True
        assert is_valid_date(-1, 2, 29) is False
        assert is_valid_date(-4, 2, 29) is True


# =============================================================================
# CLAMP-AND-REPAIR
# =============================================================================


class TestClampDate:
    """Тесты политики clamp-and-repair"""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ((2018, 2, 31), (2018, 2, 28)),
            ((2016, 2, 31), (2016, 2, 29)),
            ((2018, 4, 31), (2018, 4, 30)),
            ((2018, 2, 29), (2018, 2, 28)),
            ((2018, 0, 0), (2018, 1, 1)),
            ((2018, 13, 45), (2018, 12, 31)),
            ((2018, -5, -5), (2018, 1, 1)),
            ((2018, 14, 31), (2018, 12, 31)),
            ((-1, 2, 30), (-1, 2, 28)),
        ],
    )
    def test_repair(self, raw: tuple[int, int, int], expected: tuple[int, int, int]) -> None:
        """Невалидный ввод приводится к ближайшей валидной дате"""
        assert clamp_date(*raw) == expected

    def test_valid_date_unchanged(self) -> None:
        """Валидная дата не изменяется"""
        assert clamp_date(2018, 5, 26) == (2018, 5, 26)

    def test_month_clamped_before_day(self) -> None:
        """Сначала clamp месяца: (2016, 0, 31) -> январь, 31 валиден"""
        assert clamp_date(2016, 0, 31) == (2016, 1, 31)

    def test_result_always_valid(self) -> None:
        """Результат всегда валиден для любых полей"""
        for month in range(-2, 16):
            for day in range(-2, 35):
                assert is_valid_date(*clamp_date(2018, month, day))
                assert is_valid_date(*clamp_date(2016, month, day))

    def test_idempotent(self) -> None:
        """Повторный clamp ничего не меняет"""
        for month in range(-2, 16):
            for day in range(-2, 35):
                once = clamp_date(2019, month, day)
                assert clamp_date(*once) == once


# =============================================================================
# ДЕНЬ НЕДЕЛИ
# =============================================================================


class TestDayOfWeekIndex:
    """Тесты алгоритма Сакамото (0 — воскресенье)"""

    @pytest.mark.parametrize(
        "ymd,expected",
        [
            ((2018, 5, 26), 6),  # суббота
            ((2000, 1, 1), 6),  # суббота
            ((1970, 1, 1), 4),  # четверг
            ((1900, 1, 1), 1),  # понедельник
            ((2016, 2, 29), 1),  # понедельник
            ((2018, 12, 30), 0),  # воскресенье
            ((0, 1, 1), 6),  # суббота (пролептически)
        ],
    )
    def test_known_dates(self, ymd: tuple[int, int, int], expected: int) -> None:
        assert day_of_week_index(*ymd) == expected

    def test_consecutive_days_advance(self) -> None:
        """Каждый следующий день сдвигает индекс на 1 по модулю 7"""
        for days in range(-3000, 3000):
            today = day_of_week_index(*date_from_days(days))
            tomorrow = day_of_week_index(*date_from_days(days + 1))
            assert tomorrow == (today + 1) % 7

    def test_range(self) -> None:
        """Индекс всегда в 0..6, в том числе для отрицательных лет"""
        for year in (-401, -1, 0, 1, 2018):
            for month in range(1, 13):
                assert 0 <= day_of_week_index(year, month, 1) <= 6


# =============================================================================
# СЧЁТЧИК ДНЕЙ
# =============================================================================


class TestDaysFromYear:
    """Тесты числа дней до начала года"""

    def test_year_zero_is_reference(self) -> None:
        """Ветвь year == 0 возвращает ровно 0"""
        assert days_from_year(0) == 0

    def test_year_one_includes_leap_year_zero(self) -> None:
        """Год 0 високосный, поэтому до года 1 — 366 дней"""
        assert days_from_year(1) == 366

    def test_negative_year(self) -> None:
        """Год -1 невисокосный: -365 дней"""
        assert days_from_year(-1) == -365
        assert days_from_year(-4) == -(4 * 365 + 1)

    def test_cycle_boundaries(self) -> None:
        """±400 лет — ровно один цикл в 146 097 дней"""
        assert days_from_year(400) == DAYS_PER_400_YEARS
        assert days_from_year(-400) == -DAYS_PER_400_YEARS

    def test_unix_epoch(self) -> None:
        """1 января 1970 — день 719 528"""
        assert days_from_year(1970) == 719_528

    def test_consecutive_years_differ_by_year_length(self) -> None:
        """Разность соседних лет равна длине года"""
        for year in range(-1000, 1000):
            expected = 366 if is_leap_year(year) else 365
            assert days_from_year(year + 1) - days_from_year(year) == expected


class TestDaysFromYearMonth:
    """Тесты числа дней до начала месяца"""

    def test_january_is_zero(self) -> None:
        assert days_from_year_month(2018, 1) == 0

    def test_march_leap(self) -> None:
        assert days_from_year_month(2016, 3) == 60

    def test_march_common(self) -> None:
        assert days_from_year_month(2018, 3) == 59

    def test_december(self) -> None:
        assert days_from_year_month(2018, 12) == 334


class TestDateFromDays:
    """Тесты обратного преобразования счётчика дней"""

    @pytest.mark.parametrize(
        "days,expected",
        [
            (0, (0, 1, 1)),
            (-1, (-1, 12, 31)),
            (365, (0, 12, 31)),
            (366, (1, 1, 1)),
            (719_528, (1970, 1, 1)),
            (DAYS_PER_400_YEARS, (400, 1, 1)),
            (DAYS_PER_400_YEARS - 1, (399, 12, 31)),
            (-DAYS_PER_400_YEARS, (-400, 1, 1)),
            (-DAYS_PER_400_YEARS - 1, (-401, 12, 31)),
        ],
    )
    def test_known_day_counts(self, days: int, expected: tuple[int, int, int]) -> None:
        assert date_from_days(days) == expected

    @pytest.mark.parametrize("year", [-400, -1, 0, 1, 400, 2000, 1900])
    def test_roundtrip_every_day_of_year(self, year: int) -> None:
        """Инвариант: date_from_days(days_from_year_month_day(y, m, d)) == (y, m, d)"""
        for month in range(1, 13):
            for day in range(1, unsafe_days_in_month(year, month) + 1):
                days = days_from_year_month_day(year, month, day)
                assert date_from_days(days) == (year, month, day)

    def test_roundtrip_days_across_cycles(self) -> None:
        """Инвариант: счётчик -> дата -> счётчик на границах нескольких циклов"""
        for days in range(-2 * DAYS_PER_400_YEARS - 800, -2 * DAYS_PER_400_YEARS + 800):
            assert days_from_year_month_day(*date_from_days(days)) == days
        for days in range(DAYS_PER_400_YEARS - 800, DAYS_PER_400_YEARS + 800):
            assert days_from_year_month_day(*date_from_days(days)) == days


# =============================================================================
# СДВИГ МЕСЯЦЕВ
# =============================================================================


class TestShiftYearMonth:
    """Тесты сдвига (year, month)"""

    @pytest.mark.parametrize(
        "start,months,expected",
        [
            ((2018, 3), -1, (2018, 2)),
            ((2018, 1), -1, (2017, 12)),
            ((2018, 12), 1, (2019, 1)),
            ((2018, 3), -27, (2015, 12)),
            ((2018, 3), 0, (2018, 3)),
            ((0, 1), -13, (-2, 12)),
            ((-1, 12), 1, (0, 1)),
        ],
    )
    def test_shift(
        self, start: tuple[int, int], months: int, expected: tuple[int, int]
    ) -> None:
        """Floor-деление на 12, включая отрицательные счётчики месяцев"""
        assert shift_year_month(*start, months) == expected
