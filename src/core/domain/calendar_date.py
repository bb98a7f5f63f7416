"""
CalendarDate — Значение календарной даты (григорианский календарь)

Immutable value object:
- арифметика по дням (date + n, date - n)
- расстояние между датами в днях (date_a - date_b)
- полное упорядочивание и сравнение
- текстовый формат YYYY-MM-DD (parse / str)

Допустимый диапазон годов: 2000..2030 включительно.
"""

import re
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Final, Union


YEAR_MIN: Final[int] = 2000
YEAR_MAX: Final[int] = 2030

_DATE_PATTERN: Final[re.Pattern] = re.compile(r"([0-9]+)-([0-9]+)-([0-9]+)")


class InvalidDateError(ValueError):
    """Невалидная дата или формат."""

    def __init__(self, message: str = "invalid date or format"):
        super().__init__(message)


def is_leap_year(year: int) -> bool:
    """Високосный год по григорианскому правилу."""
    if year % 4 != 0:
        return False
    if year % 100 != 0:
        return True
    return year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """
    Количество дней в месяце.

    Returns:
        28..31, либо 0 для несуществующего месяца
    """
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    if 1 <= month <= 12:
        return 31
    return 0


@dataclass(frozen=True, order=True)
class CalendarDate:
    """
    Календарная дата.

    Порядок полей (year, month, day) задаёт сравнение (order=True).
    Все операции возвращают новый экземпляр.
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not (YEAR_MIN <= self.year <= YEAR_MAX):
            raise InvalidDateError(
                f"year {self.year} outside [{YEAR_MIN}, {YEAR_MAX}]"
            )
        if not (1 <= self.month <= 12):
            raise InvalidDateError(f"month {self.month} outside [1, 12]")
        if not (1 <= self.day <= days_in_month(self.year, self.month)):
            raise InvalidDateError(
                f"day {self.day} invalid for {self.year:04d}-{self.month:02d}"
            )

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    @classmethod
    def from_date(cls, value: date) -> "CalendarDate":
        return cls(value.year, value.month, value.day)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    @classmethod
    def parse(cls, text: str) -> "CalendarDate":
        """
        Разбор строки формата YYYY-MM-DD.

        Ведущие/замыкающие пробелы допускаются, месяц и день могут быть
        без ведущего нуля ("2015-9-3"). Принимаются только ASCII-цифры 0-9.

        Args:
            text: Строка с датой

        Returns:
            CalendarDate

        Raises:
            InvalidDateError: Если формат нарушен или дата невалидна
        """
        match = _DATE_PATTERN.fullmatch(text.strip())
        if match is None:
            raise InvalidDateError(f"cannot parse date from {text!r}")
        year, month, day = (int(part) for part in match.groups())
        return cls(year, month, day)

    def __str__(self) -> str:
        return f"{self.year}-{self.month:02d}-{self.day:02d}"

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def shift(self, days: int) -> "CalendarDate":
        """
        Сдвиг на заданное число дней (может быть отрицательным).

        Raises:
            InvalidDateError: Если результат выходит за допустимый диапазон
        """
        try:
            shifted = self.to_date() + timedelta(days=days)
        except OverflowError as e:
            raise InvalidDateError(f"shift by {days} days overflows") from e
        return CalendarDate.from_date(shifted)

    def succ(self) -> "CalendarDate":
        """Следующий день."""
        return self.shift(1)

    def pred(self) -> "CalendarDate":
        """Предыдущий день."""
        return self.shift(-1)

    def __add__(self, days: int) -> "CalendarDate":
        if isinstance(days, bool) or not isinstance(days, int):
            return NotImplemented
        return self.shift(days)

    def __sub__(self, other: Union[int, "CalendarDate"]):
        # date - date → абсолютное расстояние в днях
        if isinstance(other, CalendarDate):
            return abs(self.to_date().toordinal() - other.to_date().toordinal())
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self.shift(-other)
