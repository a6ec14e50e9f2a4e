import pytest

from formatting import (
    get_semester_name,
    humanize_array,
    period_to_string,
    simplify_name,
    string_to_time,
    time_to_short_string,
    time_to_string,
    unique,
)
from models import Period


@pytest.mark.parametrize(
    "text, minutes",
    [
        ("9:30 am", 570),
        ("12:05 am", 5),
        ("12:00 pm", 720),
        ("3:15 pm", 915),
        ("noon", 0),
    ],
)
def test_string_to_time(text, minutes):
    assert string_to_time(text) == minutes


def test_time_to_string():
    assert time_to_string(570) == "9:30 am"
    assert time_to_string(750) == "12:30 pm"
    assert time_to_string(915) == "3:15 pm"
    assert time_to_string(915, ampm=False) == "3:15"


def test_time_to_short_string():
    assert time_to_short_string(540) == "9am"
    assert time_to_short_string(840) == "2pm"


def test_period_to_string():
    assert period_to_string(Period(start=570, end=645)) == "9:30 - 10:45 am"
    assert period_to_string(None) == "TBA"


def test_simplify_name():
    assert simplify_name("Ada Byron Lovelace") == "Ada Lovelace"
    assert simplify_name("Grace Hopper") == "Grace Hopper"
    assert simplify_name("Plato") == "Plato"


def test_unique_keeps_first_occurrence():
    assert unique(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


@pytest.mark.parametrize(
    "term, name",
    [
        ("202001", "Winter 2020"),
        ("202002", "Spring 2020"),
        ("202005", "Summer 2020"),
        ("202008", "Fall 2020"),
        ("202004", "Unknown 2020"),
        ("2020", "Unknown 2020"),
        ("20208a", "Fall 2020"),
        ("2020ab", "Unknown 2020"),
    ],
)
def test_get_semester_name(term, name):
    assert get_semester_name(term) == name


def test_humanize_array():
    assert humanize_array([]) == ""
    assert humanize_array(["A"]) == "A"
    assert humanize_array(["A", "B"]) == "A and B"
    assert humanize_array(["A", "B", "C"], "or") == "A, B, or C"
