from easter_report.context import Context
from easter_report.model import (
    YEAR_MIN,
    YEAR_MAX,
    EasterDate,
    Month,
    ReportStatus,
    YearSpec,
    easter_date,
    easter_dates,
    format_month,
)
from easter_report.parser import parse_year_spec, parse_years
from easter_report.render import render_report, write_report
from easter_report.report import EasterReport, compute_easter_report, easter_report
from easter_report.util import EasterReportException, YearSpecError, is_valid_filename

__all__ = [
    "YEAR_MIN",
    "YEAR_MAX",
    "Context",
    "EasterDate",
    "EasterReport",
    "EasterReportException",
    "Month",
    "ReportStatus",
    "YearSpec",
    "YearSpecError",
    "compute_easter_report",
    "easter_date",
    "easter_dates",
    "easter_report",
    "format_month",
    "is_valid_filename",
    "parse_year_spec",
    "parse_years",
    "render_report",
    "write_report",
]
