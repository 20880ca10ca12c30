import pytest

from grcal.infra.errors import ContractViolation
from grcal.rules.rules import MONTH_PATTERN, CalendarRules, MonthKind


@pytest.mark.parametrize("year,leap", [
    (2000, True),
    (1600, True),
    (2400, True),
    (1900, False),
    (1700, False),
    (2100, False),
    (2024, True),
    (1584, True),
    (2023, False),
    (1, False),
    (4, True),
])
def test_is_leap_year(year, leap):
    assert CalendarRules.is_leap_year(year) is leap


@pytest.mark.parametrize("year", [0, -4, -400])
def test_is_leap_year_requires_positive_year(year):
    with pytest.raises(ContractViolation):
        CalendarRules.is_leap_year(year)


def test_month_pattern_starts_in_march():
    lengths = [CalendarRules.month_length(i) for i in range(12)]
    assert lengths == [31, 30, 31, 30, 31, 31, 30, 31, 30, 31, 31, None]
    assert MONTH_PATTERN[-1] is MonthKind.VARIABLE
    assert MONTH_PATTERN.count(MonthKind.VARIABLE) == 1


def test_fixed_months_add_up_to_common_year_without_february():
    assert sum(CalendarRules.month_length(i) for i in range(11)) == 365 - 28


@pytest.mark.parametrize("index", [-1, 12, 100])
def test_month_index_out_of_range(index):
    with pytest.raises(ContractViolation):
        CalendarRules.month_length(index)
    with pytest.raises(ContractViolation):
        CalendarRules.month_kind(index)


def test_february_belongs_to_following_january_year():
    # March-based 1999 ends with February 2000
    assert CalendarRules.resolve_month_length(11, 1999) == 29
    assert CalendarRules.resolve_month_length(11, 1899) == 28
    assert CalendarRules.resolve_month_length(11, 2023) == 29
    assert CalendarRules.resolve_month_length(11, 2024) == 28


def test_resolve_fixed_month_ignores_year():
    assert CalendarRules.resolve_month_length(0, 1999) == 31
    assert CalendarRules.resolve_month_length(1, 2000) == 30
