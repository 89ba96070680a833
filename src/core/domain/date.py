"""
Date — Модель календарной даты

Immutable Pydantic модель даты пролептического григорианского календаря.
Любые три целых (year, month, day) превращаются в валидную дату политикой
clamp-and-repair; наблюдать невалидную Date невозможно.

Все "изменения" даты возвращают новый экземпляр.
"""

import logging
from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, model_validator

from src.core.math.gregorian import (
    clamp_date,
    date_from_days,
    day_of_week_index,
    days_from_year_month_day,
    is_leap_year,
    is_valid_date,
    shift_year_month,
    unsafe_days_in_month,
)
from src.core.math.integer_safeguards import is_plain_int

if TYPE_CHECKING:
    from src.core.domain.date_time import DateTime

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class Weekday(str, Enum):
    """
    День недели.

    Порядок членов (воскресенье..суббота) совпадает с индексом
    алгоритма Сакамото и должен сохраняться.
    """

    SUNDAY = "Sunday"
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"

    @classmethod
    def from_index(cls, index: int) -> "Weekday":
        """0 -> SUNDAY, ..., 6 -> SATURDAY (индекс берётся по модулю 7)"""
        return list(cls)[index % 7]


# =============================================================================
# DATE DELTA
# =============================================================================


class DateDelta(BaseModel):
    """
    Разница двух дат в трёх независимых единицах.

    Поля — разные "виды" одной пары дат, а не разложение одной величины:
    years и months не обязаны согласовываться с days.
    """

    years: int = Field(..., description="year1 - year2")
    months: int = Field(..., description="(|year1|*12 + month1) - (|year2|*12 + month2)")
    days: int = Field(..., description="Разница линейных счётчиков дней")

    model_config = {"frozen": True, "strict": True}


# =============================================================================
# DATE MODEL
# =============================================================================


class Date(BaseModel):
    """
    Календарная дата.

    Immutable модель (frozen=True), strict: поля принимают только int.
    Построение никогда не отклоняет календарно невалидный ввод:
    - month ограничивается [1, 12]
    - day ограничивается [1, 31]
    - затем проверяются day, day-1, day-2, day-3 (первая валидная тройка)

    Для строгой проверки ввода используйте Date.is_valid().
    """

    year: int = Field(..., description="Год (любой знак, год 0 существует)")
    month: int = Field(..., description="Месяц 1..12")
    day: int = Field(..., description="День 1..days_in_month(year, month)")

    model_config = {"frozen": True, "strict": True}

    @model_validator(mode="before")
    @classmethod
    def clamp_and_repair(cls, data: Any) -> Any:
        """Приведение (year, month, day) к ближайшей валидной дате"""
        if not isinstance(data, Mapping):
            return data

        year, month, day = data.get("year"), data.get("month"), data.get("day")
        if not all(is_plain_int(v) for v in (year, month, day)):
            # Ошибку типа сообщит strict-валидация полей
            return data

        repaired = clamp_date(year, month, day)
        if repaired != (year, month, day):
            logger.debug(
                "Date (%d, %d, %d) repaired to (%d, %d, %d)",
                year, month, day, *repaired,
            )
        return {**data, "year": repaired[0], "month": repaired[1], "day": repaired[2]}

    # -------------------------------------------------------------------------
    # Альтернативные конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_tuple(cls, ymd: tuple[int, int, int]) -> "Date":
        """Импорт из тройки (year, month, day) с clamp-and-repair"""
        year, month, day = ymd
        return cls(year=year, month=month, day=day)

    @classmethod
    def from_day_count(cls, days: int) -> "Date":
        """
        Дата по линейному счётчику дней (день 0 — 1 января года 0).

        Каждому целому соответствует ровно одна дата.
        """
        year, month, day = date_from_days(days)
        return cls(year=year, month=month, day=day)

    @staticmethod
    def is_valid(year: int, month: int, day: int) -> bool:
        """Является ли (year, month, day) существующей датой"""
        return is_valid_date(year, month, day)

    def model_copy(
        self, *, update: Mapping[str, Any] | None = None, deep: bool = False
    ) -> "Date":
        """
        Копия с заменой полей.

        В отличие от BaseModel.model_copy, update проходит clamp-and-repair.
        """
        if not update:
            return super().model_copy(deep=deep)
        return Date.model_validate(
            {"year": self.year, "month": self.month, "day": self.day, **update}
        )

    # -------------------------------------------------------------------------
    # Запросы
    # -------------------------------------------------------------------------

    def to_tuple(self) -> tuple[int, int, int]:
        """Экспорт в (year, month, day) для ключей словарей и сериализации"""
        return (self.year, self.month, self.day)

    def day_count(self) -> int:
        return days_from_year_month_day(self.year, self.month, self.day)

    def weekday(self) -> Weekday:
        """День недели (алгоритм Сакамото)"""
        return Weekday.from_index(day_of_week_index(self.year, self.month, self.day))

    def is_leap_year(self) -> bool:
        return is_leap_year(self.year)

    def days_in_month(self) -> int:
        # Месяц всегда валиден, поэтому None невозможен
        return unsafe_days_in_month(self.year, self.month)

    # -------------------------------------------------------------------------
    # Замена полей
    # -------------------------------------------------------------------------

    def set_year(self, year: int) -> "Date":
        return Date(year=year, month=self.month, day=self.day)

    def set_month(self, month: int) -> "Date":
        return Date(year=self.year, month=month, day=self.day)

    def set_day(self, day: int) -> "Date":
        return Date(year=self.year, month=self.month, day=day)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add_years(self, years: int) -> "Date":
        """
        Сдвиг на years лет с repair дня.

        Examples:
            29.02.2000 - 1 год -> 28.02.1999
        """
        return Date(year=self.year + years, month=self.month, day=self.day)

    def add_months(self, months: int) -> "Date":
        """
        Сдвиг на months месяцев с repair исходного дня.

        Examples:
            31.03.2018 - 1 месяц -> 28.02.2018
        """
        year, month = shift_year_month(self.year, self.month, months)
        return Date(year=year, month=month, day=self.day)

    def add_days(self, days: int) -> "Date":
        """Точный сдвиг на days дней через линейный счётчик (без repair)"""
        if days == 0:
            return self
        return Date.from_day_count(self.day_count() + days)

    def delta(self, other: "Date") -> DateDelta:
        """
        Разница self - other.

        - years: простая разность годов
        - months: (|year1|*12 + month1) - (|year2|*12 + month2)
        - days: разность линейных счётчиков дней

        Поля вычисляются независимо. Формула months использует модуль года
        и неинтуитивна для пар, пересекающих год 0; она сохраняется как есть.
        """
        return DateDelta(
            years=self.year - other.year,
            months=(abs(self.year) * 12 + self.month) - (abs(other.year) * 12 + other.month),
            days=self.day_count() - other.day_count(),
        )

    def at(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> "DateTime":
        """DateTime в этот день с заданным (clamped) временем"""
        from src.core.domain.date_time import DateTime

        return DateTime.from_fields(self, hour, minute, second, millisecond)

    # -------------------------------------------------------------------------
    # Сравнение (лексикографически по (year, month, day))
    # -------------------------------------------------------------------------

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.to_tuple() < other.to_tuple()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.to_tuple() <= other.to_tuple()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.to_tuple() > other.to_tuple()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.to_tuple() >= other.to_tuple()

