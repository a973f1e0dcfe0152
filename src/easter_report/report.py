from typing import Optional, Self
from dataclasses import dataclass, field
import logging
import os

from easter_report.context import Context
from easter_report.model import EasterDate, ReportStatus, YearSpec, easter_dates
from easter_report.parser import parse_year_spec
from easter_report.render import render_report, write_report
from easter_report.util import YearSpecError, is_valid_filename

log = logging.getLogger(__name__)


@dataclass
class EasterReport:
    spec: YearSpec
    ctx: Context = field(default_factory=Context)

    @classmethod
    def parse(cls, years: str, ctx: Optional[Context] = None) -> Self:
        """Parse a year specification such as `2012,2013,2015-2020`."""
        return cls(parse_year_spec(years), ctx or Context())

    def years(self) -> list[int]:
        return list(self.spec.years())

    def dates(self) -> list[EasterDate]:
        """Easter Sundays of the selected years, in the order they were specified."""
        return easter_dates(self.spec.years())

    def render(self) -> str:
        return render_report(self.dates(), self.ctx)

    def write(self, filename: str | os.PathLike) -> None:
        write_report(self.dates(), filename, self.ctx)


def compute_easter_report(years: str) -> list[EasterDate]:
    return EasterReport.parse(years).dates()


def easter_report(
    years: str, filename: str | os.PathLike, ctx: Optional[Context] = None
) -> ReportStatus:
    """Write the Easter Sundays of `years` as an HTML table into `filename`.

    Failures are not raised, they are reported through the returned status."""
    if not is_valid_filename(filename):
        log.warning("invalid output file name %r", filename)
        return ReportStatus.INVALID_FILENAME

    try:
        report = EasterReport.parse(years, ctx)
    except YearSpecError as err:
        log.warning("invalid years: %s", err)
        return ReportStatus.INVALID_INPUT

    try:
        report.write(filename)
    except (OSError, UnicodeError, LookupError) as err:
        log.warning("could not write %s: %s", filename, err)
        return ReportStatus.IO_ERROR

    return ReportStatus.OK
