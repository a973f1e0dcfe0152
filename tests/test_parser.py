import pytest

from easter_report import YearSpecError, parse_year_spec, parse_years
from easter_report.model import Year, YearRange, YearSpec


@pytest.mark.parametrize(
    "value,years",
    [
        ("2012", [2012]),
        ("2012,2013,2015-2020", [2012, 2013, 2015, 2016, 2017, 2018, 2019, 2020]),
        ("1583,2199", [1583, 2199]),
        ("1583-1585", [1583, 1584, 1585]),
        ("2020-2020", [2020]),
        ("02012", [2012]),
        # one whitespace character after a comma is skipped
        ("2012, 2013", [2012, 2013]),
        ("2012,\t2013", [2012, 2013]),
        ("2012, 2013-2014, 2015", [2012, 2013, 2014, 2015]),
        # order and duplicates are kept
        ("2020,2012", [2020, 2012]),
        ("2013,2012,2013", [2013, 2012, 2013]),
        ("2015-2017,2016", [2015, 2016, 2017, 2016]),
    ],
)
def test_parse_years(value: str, years: list[int]):
    assert parse_years(value) == years


@pytest.mark.parametrize(
    "value",
    [
        "",
        ",",
        ",2020",
        "2020,",
        "2012,,2013",
        # inverted range
        "2020-2015",
        # out of range
        "1582",
        "2200",
        "0",
        "1582-1590",
        "2190-2200",
        "2012,99999999999999999999",
        pytest.param("9" * 5000, id="huge_year"),
        pytest.param("2012-" + "9" * 5000, id="huge_range_end"),
        # whitespace
        " 2012",
        "2012 ",
        "2012 ,2013",
        "2012,  2013",
        "2012 - 2013",
        # malformed tokens
        "abc",
        "20x2",
        "2012a",
        "+2012",
        "-2012",
        "2012-",
        "2012--2013",
        "2012-2013-2014",
        "2012.5",
        "2012;2013",
        "٢٠١٢",
    ],
)
def test_parse_years_fail(value: str):
    with pytest.raises(YearSpecError):
        parse_years(value)


def test_parse_year_spec():
    spec = parse_year_spec("2012,2013, 2015-2020")
    assert spec == YearSpec([Year(2012), Year(2013), YearRange(2015, 2020)])
    assert str(spec) == "2012, 2013, 2015-2020"
    assert len(spec) == 8


def test_parse_error_details():
    with pytest.raises(YearSpecError) as exc_info:
        parse_years("2012,1500")
    assert exc_info.value.spec == "2012,1500"
    assert "1500" in str(exc_info.value)

    with pytest.raises(ValueError) as exc_info:
        parse_years("2012,x")
    assert isinstance(exc_info.value, YearSpecError)
    assert exc_info.value.spec == "2012,x"


@pytest.mark.parametrize(
    "start,end",
    [
        (2020, 2015),
        (1582, 2000),
        (2000, 2200),
    ],
)
def test_year_range_fail(start: int, end: int):
    with pytest.raises(YearSpecError):
        YearRange(start, end)


def test_year_range_years():
    assert list(YearRange(2015, 2017).years()) == [2015, 2016, 2017]
    assert len(YearRange(2015, 2017)) == 3
    assert list(Year(2015).years()) == [2015]
