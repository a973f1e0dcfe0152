from typing import Iterable
from dataclasses import dataclass
import datetime

from easter_report.model.enums import Month, format_month
from easter_report.model.util import ModelBase


@dataclass(frozen=True)
class EasterDate(ModelBase):
    year: int
    month: Month
    day: int

    @property
    def month_name(self) -> str:
        return format_month(self.month)

    def to_date(self) -> datetime.date:
        return datetime.date(self.year, self.month, self.day)

    def __str__(self) -> str:
        return f"{self.day}. {self.month_name} {self.year}"


def easter_date(year: int) -> EasterDate:
    """Find Easter Sunday for given year

    Only defined for years 1583 to 2199, callers are expected to validate the
    year beforehand.

    See https://en.wikipedia.org/wiki/Date_of_Easter#Anonymous_Gregorian_algorithm"""

    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 22 * l) // 451
    n = (h + l - 7 * m + 114) // 31
    p = (h + l - 7 * m + 114) % 31

    return EasterDate(year, Month(n), p + 1)


def easter_dates(years: Iterable[int]) -> list[EasterDate]:
    return [easter_date(year) for year in years]
