from typing import Optional
import os

HTML_SUFFIX = ".html"
FILENAME_MIN_LENGTH = 6
FILENAME_EXTRA_CHARS = frozenset("\\/.")


class EasterReportException(Exception):
    pass


class YearSpecError(EasterReportException, ValueError):
    def __init__(
        self, message: str, spec: Optional[str] = None, column: Optional[int] = None
    ):
        super().__init__(message)
        self.spec = spec
        self.column = column

    def __str__(self) -> str:
        res = super().__str__()
        if self.spec is not None:
            res += f" in {self.spec!r}"
        if self.column is not None and self.column > 0:
            res += f" at column {self.column}"
        return res


def _is_valid_filename_char(c: str) -> bool:
    return (c.isascii() and c.isalnum()) or c in FILENAME_EXTRA_CHARS


def is_valid_filename(name: str | os.PathLike) -> bool:
    """Check that `name` is an acceptable destination for a report.

    A valid name is at least six characters long, ends with `.html` and is only
    made of ASCII letters, digits and the characters `\\`, `/` and `.`."""
    name = os.fspath(name)
    if not isinstance(name, str):
        return False

    if len(name) < FILENAME_MIN_LENGTH:
        return False

    if not name.endswith(HTML_SUFFIX):
        return False

    return all(_is_valid_filename_char(c) for c in name)

