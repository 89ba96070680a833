"""
DateTime — Модель даты и времени суток

Immutable Pydantic модель: Date + offset (миллисекунды с полуночи).
Инвариант: 0 <= offset < DAY_MS. Смещение вне диапазона при построении
не отклоняется, а переносится в дату (carry).

Вся календарная логика (перенос дней в месяцы и годы) делегируется Date;
модуль её не дублирует.

ЭПОХА:
    EPOCH = 1970-01-01 00:00:00.000
    timestamp_ms(dt)        == dt.delta(EPOCH).milliseconds
    from_timestamp_ms(t)    == EPOCH.add_milliseconds(t)
"""

import logging
from collections.abc import Mapping
from typing import Any, Final

from pydantic import BaseModel, Field, model_validator

from src.core.domain.date import Date, DateDelta
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
from src.core.math.integer_safeguards import is_plain_int, trunc_div

logger = logging.getLogger(__name__)

EPOCH_YEAR: Final[int] = 1970


# =============================================================================
# DATE TIME DELTA
# =============================================================================


class DateTimeDelta(BaseModel):
    """
    Разница двух DateTime.

    years/months/days берутся из DateDelta (независимые виды).
    hours/minutes/seconds/milliseconds — виды ОДНОЙ величины:
        milliseconds = days * DAY_MS + (offset1 - offset2)
    hours/minutes/seconds — целочисленное деление milliseconds
    с усечением к нулю.
    """

    years: int = Field(..., description="year1 - year2 (из DateDelta)")
    months: int = Field(..., description="Разница месяцев (из DateDelta)")
    days: int = Field(..., description="Разница счётчиков дней (из DateDelta)")
    hours: int = Field(..., description="milliseconds / HOUR_MS, усечение к нулю")
    minutes: int = Field(..., description="milliseconds / MINUTE_MS, усечение к нулю")
    seconds: int = Field(..., description="milliseconds / SECOND_MS, усечение к нулю")
    milliseconds: int = Field(..., description="days * DAY_MS + (offset1 - offset2)")

    model_config = {"frozen": True, "strict": True}

    @classmethod
    def from_parts(cls, date_delta: DateDelta, milliseconds: int) -> "DateTimeDelta":
        return cls(
            years=date_delta.years,
            months=date_delta.months,
            days=date_delta.days,
            hours=trunc_div(milliseconds, HOUR_MS),
            minutes=trunc_div(milliseconds, MINUTE_MS),
            seconds=trunc_div(milliseconds, SECOND_MS),
            milliseconds=milliseconds,
        )


# =============================================================================
# DATE TIME MODEL
# =============================================================================


class DateTime(BaseModel):
    """
    Дата и время суток с миллисекундной точностью, без часового пояса.

    Immutable модель (frozen=True). Сравнение — хронологическое,
    по числу миллисекунд от фиксированной точки отсчёта.
    """

    date: Date = Field(..., description="Календарная дата")
    offset: int = Field(..., description="Миллисекунды с полуночи, [0, DAY_MS)")

    model_config = {"frozen": True, "strict": True}

    @model_validator(mode="before")
    @classmethod
    def normalize_offset(cls, data: Any) -> Any:
        """
        Перенос offset вне [0, DAY_MS) в дату.

        date принимается как Date или как mapping (model_validate,
        model_validate_json, повторное чтение model_dump()).
        """
        if not isinstance(data, Mapping):
            return data

        date, offset = data.get("date"), data.get("offset")
        if not is_plain_int(offset) or 0 <= offset < DAY_MS:
            return data

        if isinstance(date, Date):
            base = date
        elif isinstance(date, Mapping) and all(
            is_plain_int(date.get(key)) for key in ("year", "month", "day")
        ):
            base = Date(year=date["year"], month=date["month"], day=date["day"])
        else:
            # Ошибку типа сообщит strict-валидация полей
            return data

        extra_days, new_offset = carry_milliseconds(0, offset)
        logger.debug(
            "DateTime offset %d normalized to %d with %+d day(s)",
            offset, new_offset, extra_days,
        )
        new_date = base.add_days(extra_days)
        if not isinstance(date, Date):
            # Форма входа сохраняется: mapping остаётся mapping
            new_date = new_date.model_dump()
        return {**data, "date": new_date, "offset": new_offset}

    # -------------------------------------------------------------------------
    # Альтернативные конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_fields(
        cls,
        date: Date,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> "DateTime":
        """
        DateTime из даты и полей времени.

        Каждое поле времени ограничивается своим диапазоном независимо.
        """
        return cls(date=date, offset=offset_from_fields(hour, minute, second, millisecond))

    @classmethod
    def from_parts(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> "DateTime":
        """
        DateTime из семи целых.

        Валидность даты полностью определяется политикой Date.
        """
        return cls.from_fields(
            Date(year=year, month=month, day=day), hour, minute, second, millisecond
        )

    @classmethod
    def from_timestamp_ms(cls, timestamp_ms: int) -> "DateTime":
        """DateTime по числу миллисекунд от эпохи 1970-01-01T00:00:00.000"""
        return EPOCH.add_milliseconds(timestamp_ms)

    # -------------------------------------------------------------------------
    # Поля времени
    # -------------------------------------------------------------------------

    @property
    def hour(self) -> int:
        return offset_hour(self.offset)

    @property
    def minute(self) -> int:
        return offset_minute(self.offset)

    @property
    def second(self) -> int:
        return offset_second(self.offset)

    @property
    def millisecond(self) -> int:
        return offset_millisecond(self.offset)

    def model_copy(
        self, *, update: Mapping[str, Any] | None = None, deep: bool = False
    ) -> "DateTime":
        """
        Копия с заменой полей.

        В отличие от BaseModel.model_copy, update проходит нормализацию offset.
        """
        if not update:
            return super().model_copy(deep=deep)
        return DateTime.model_validate({"date": self.date, "offset": self.offset, **update})

    def timestamp_ms(self) -> int:
        """Миллисекунды от эпохи (точная обратная к from_timestamp_ms)"""
        return self.delta(EPOCH).milliseconds

    # -------------------------------------------------------------------------
    # Замена полей (дата та же, все четыре поля проходят clamp заново)
    # -------------------------------------------------------------------------

    def set_hour(self, hour: int) -> "DateTime":
        return DateTime.from_fields(self.date, hour, self.minute, self.second, self.millisecond)

    def set_minute(self, minute: int) -> "DateTime":
        return DateTime.from_fields(self.date, self.hour, minute, self.second, self.millisecond)

    def set_second(self, second: int) -> "DateTime":
        return DateTime.from_fields(self.date, self.hour, self.minute, second, self.millisecond)

    def set_millisecond(self, millisecond: int) -> "DateTime":
        return DateTime.from_fields(self.date, self.hour, self.minute, self.second, millisecond)

    def with_date(self, date: Date) -> "DateTime":
        """То же время суток в другой день"""
        return DateTime(date=date, offset=self.offset)

    # -------------------------------------------------------------------------
    # Арифметика времени (перенос только через add_milliseconds)
    # -------------------------------------------------------------------------

    def add_milliseconds(self, milliseconds: int) -> "DateTime":
        """
        Сдвиг на знаковое число миллисекунд с переносом в дни.

        Examples:
            2018-12-31 23:59:59.999 + 1 ms -> 2019-01-01 00:00:00.000
        """
        extra_days, new_offset = carry_milliseconds(self.offset, milliseconds)
        return DateTime(date=self.date.add_days(extra_days), offset=new_offset)

    def add_seconds(self, seconds: int) -> "DateTime":
        return self.add_milliseconds(seconds * SECOND_MS)

    def add_minutes(self, minutes: int) -> "DateTime":
        return self.add_milliseconds(minutes * MINUTE_MS)

    def add_hours(self, hours: int) -> "DateTime":
        return self.add_milliseconds(hours * HOUR_MS)

    # -------------------------------------------------------------------------
    # Календарная арифметика (делегируется Date, offset не меняется)
    # -------------------------------------------------------------------------

    def add_days(self, days: int) -> "DateTime":
        return self.with_date(self.date.add_days(days))

    def add_months(self, months: int) -> "DateTime":
        return self.with_date(self.date.add_months(months))

    def add_years(self, years: int) -> "DateTime":
        return self.with_date(self.date.add_years(years))

    def delta(self, other: "DateTime") -> DateTimeDelta:
        """
        Разница self - other.

        days берётся из Date.delta и не пересчитывается отдельно,
        поэтому milliseconds согласованы с days.
        """
        date_delta = self.date.delta(other.date)
        milliseconds = date_delta.days * DAY_MS + (self.offset - other.offset)
        return DateTimeDelta.from_parts(date_delta, milliseconds)

    # -------------------------------------------------------------------------
    # Сравнение (хронологическое)
    # -------------------------------------------------------------------------

    def _ordinal_ms(self) -> int:
        return self.date.day_count() * DAY_MS + self.offset

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._ordinal_ms() < other._ordinal_ms()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._ordinal_ms() <= other._ordinal_ms()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._ordinal_ms() > other._ordinal_ms()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._ordinal_ms() >= other._ordinal_ms()


EPOCH: Final[DateTime] = DateTime(date=Date(year=EPOCH_YEAR, month=1, day=1), offset=0)
