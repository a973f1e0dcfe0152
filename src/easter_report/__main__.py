"""Write the Easter Sundays of a list of years into an HTML table"""

import argparse
import logging
import sys

from easter_report.context import Context
from easter_report.model import ReportStatus
from easter_report.report import easter_report


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="easter-report",
        description="Write the dates of Easter Sunday for the given years into an HTML table",
    )
    parser.add_argument("years", help="years and year ranges, eg. 2012,2013,2015-2020")
    parser.add_argument(
        "-o", "--output", default="easter.html", help="output file (default: %(default)s)"
    )
    parser.add_argument("--title", default=Context.title, help="HTML page title")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log debugging information"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    status = easter_report(args.years, args.output, Context(title=args.title))
    if status == ReportStatus.OK:
        print(args.output)
    return int(status)


if __name__ == "__main__":
    sys.exit(main())
