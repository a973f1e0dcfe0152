from typing import Sequence, Iterator
from dataclasses import dataclass

from easter_report.model import easter, year  # noqa: F401
from easter_report.model.easter import EasterDate, easter_date, easter_dates
from easter_report.model.enums import Month, ReportStatus, format_month
from easter_report.model.util import ModelBase, fmt_selector
from easter_report.model.year import (
    YEAR_MIN,
    YEAR_MAX,
    Year,
    YearRange,
    YearSelector,
    is_admissible_year,
)

__all__ = [
    "YEAR_MIN",
    "YEAR_MAX",
    "EasterDate",
    "Month",
    "ReportStatus",
    "Year",
    "YearRange",
    "YearSelector",
    "YearSpec",
    "easter_date",
    "easter_dates",
    "format_month",
    "is_admissible_year",
]


@dataclass
class YearSpec(ModelBase):
    selectors: Sequence[YearSelector]

    def years(self) -> Iterator[int]:
        """
        Iterate over the selected years in the order they were written. Ranges are
        expanded in ascending order and repeated years are kept.
        """
        for selector in self.selectors:
            yield from selector.years()

    def __len__(self) -> int:
        return sum(len(selector) for selector in self.selectors)

    def __str__(self) -> str:
        return fmt_selector(self.selectors)
