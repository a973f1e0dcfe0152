from typing import Iterable
import html
import logging
import os

from easter_report.context import Context
from easter_report.model import EasterDate

log = logging.getLogger(__name__)


HTML_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta http-equiv="Content-Type" content="text/html; charset={charset}">
<title>{title}</title>
</head>
<body>
<table width="300">
<tr><th width="99">den</th><th width="99">mesic</th><th width="99">rok</th></tr>
{rows}</table>
</body>
</html>
"""

ROW_TEMPLATE = "<tr><td>{day}</td><td>{month}</td><td>{year}</td></tr>\n"


def render_row(date: EasterDate) -> str:
    return ROW_TEMPLATE.format(day=date.day, month=date.month_name, year=date.year)


def render_report(dates: Iterable[EasterDate], ctx: Context) -> str:
    """Render an HTML document with one table row per date, in the given order."""
    return HTML_TEMPLATE.format(
        charset=html.escape(ctx.charset),
        title=html.escape(ctx.title),
        rows="".join(render_row(date) for date in dates),
    )


def write_report(
    dates: Iterable[EasterDate], filename: str | os.PathLike, ctx: Context
) -> None:
    """Render the report and write it to `filename` in one pass.

    The document is encoded before the file is opened, so an unknown charset or a
    title that does not fit it leaves no file behind."""
    data = render_report(dates, ctx).encode(ctx.charset)
    with open(filename, "wb") as f:
        f.write(data)
    log.debug("wrote %d bytes to %s", len(data), filename)
