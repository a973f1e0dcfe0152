from typing import Iterator
from dataclasses import dataclass

from easter_report.model.util import ModelBase
from easter_report.util import YearSpecError

# Bounds of the admissible years, both exclusive
YEAR_MIN = 1582
YEAR_MAX = 2200


def is_admissible_year(year: int) -> bool:
    return YEAR_MIN < year < YEAR_MAX


def check_year(year: int):
    if not is_admissible_year(year):
        raise YearSpecError(
            f"year {year} is out of range, expected {YEAR_MIN} < year < {YEAR_MAX}"
        )


@dataclass(frozen=True)
class Year(ModelBase):
    year: int

    def __post_init__(self):
        check_year(self.year)

    def years(self) -> Iterator[int]:
        yield self.year

    def __len__(self) -> int:
        return 1

    def __str__(self) -> str:
        return str(self.year)


@dataclass(frozen=True)
class YearRange(ModelBase):
    start: int
    end: int

    def __post_init__(self):
        check_year(self.start)
        check_year(self.end)
        if self.start > self.end:
            raise YearSpecError(
                f"year range {self.start}-{self.end} has start year > end year"
            )

    def years(self) -> Iterator[int]:
        return iter(range(self.start, self.end + 1))

    def __len__(self) -> int:
        return self.end - self.start + 1

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


YearSelector = Year | YearRange
