import pytest

from bloodsugar.averages import (
    calculate_number_ave,
    calculate_range_ave,
    get_index_for_date,
    last_days_average,
    range_average,
)
from bloodsugar.date import Date
from bloodsugar.entry import Entry


def _entries(*values):
    return [Entry(Date(5, day, 20), value) for day, value in enumerate(values, start=1)]


def _scripted(*answers):
    replies = iter(answers)
    return lambda prompt: next(replies)


def test_get_index_for_date():
    entries = _entries(100, 200, 300)
    assert get_index_for_date(entries, "5/3/20") == 2
    assert get_index_for_date(entries, "5/1/20") == 0


def test_get_index_for_missing_date():
    with pytest.raises(ValueError):
        get_index_for_date(_entries(100), "6/1/20")


def test_range_average_single_day():
    entries = _entries(100, 200, 300)
    assert range_average(entries, "5/2/20", "5/2/20") == (200, 1)


def test_range_average_of_equal_values():
    entries = _entries(120, 120, 120, 120)
    assert range_average(entries, "5/1/20", "5/4/20") == (120, 4)


def test_range_average_truncates():
    assert range_average(_entries(1, 2), "5/1/20", "5/2/20") == (1, 2)


def test_range_average_reversed_range():
    with pytest.raises(ValueError):
        range_average(_entries(100, 200), "5/2/20", "5/1/20")


def test_last_days_average_last_entry():
    assert last_days_average(_entries(100, 200, 300), 1) == 300


def test_last_days_average_matches_full_range():
    entries = _entries(97, 143, 110, 188, 102)
    average, days = range_average(entries, "5/1/20", "5/5/20")
    assert last_days_average(entries, len(entries)) == average
    assert days == len(entries)


@pytest.mark.parametrize("days", [0, -1, 4])
def test_last_days_average_out_of_range(days):
    with pytest.raises(ValueError):
        last_days_average(_entries(100, 200, 300), days)


def test_calculate_number_ave_reprompts_and_reports():
    said = []
    calculate_number_ave(_entries(120, 120, 120), _scripted("0", "5", "-1", "2"), said.append)
    assert said == [
        "The number of days you entered was too small (less than 1). "
        "Please enter a number greater than 0 and less than 3.",
        "The number of days you entered was too big. Please enter a number less than 3.",
        "The number of days you entered was too big. Please enter a number less than 3.",
        "The average for the last 2 days is 120.",
    ]


def test_calculate_range_ave_reports():
    said = []
    calculate_range_ave(_entries(130, 130, 130), _scripted("5/1/20", "5/3/20"), said.append)
    assert said == ["The average from 5/1/20 to 5/3/20 (3 days) is 130."]


def test_calculate_range_ave_reprompts_on_unknown_date():
    said = []
    ask = _scripted("6/1/20", "5/2/20", "5/2/20")
    calculate_range_ave(_entries(130, 140), ask, said.append)
    assert said[-1] == "The average from 5/2/20 to 5/2/20 (1 days) is 140."
    assert len(said) == 2