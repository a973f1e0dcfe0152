import enum


class Month(enum.IntEnum):
    MARCH = 3
    APRIL = 4

    def __str__(self) -> str:
        return format_month(self)


MONTH_NAMES = {
    Month.MARCH: "brezen",
    Month.APRIL: "duben",
}


def format_month(month: Month) -> str:
    return MONTH_NAMES[month]


class ReportStatus(enum.IntEnum):
    OK = 0
    INVALID_FILENAME = 1
    INVALID_INPUT = 2
    IO_ERROR = 3

    def __str__(self) -> str:
        return self.name.lower()
