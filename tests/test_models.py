from pathlib import Path

import pytest
from pydantic import ValidationError

from core.domain.models import ScaffoldRequest, current_year


@pytest.mark.parametrize(
    ("day", "expected"),
    [(1, "day01"), (9, "day09"), (10, "day10"), (25, "day25")],
)
def test_day_directory_is_zero_padded(day, expected):
    assert ScaffoldRequest(day=day, year=2024).day_dir_name == expected


def test_derived_names():
    request = ScaffoldRequest(day=7, year=2023)

    assert request.package_name == "day07-2023"
    assert request.relative_dir == Path("solutions") / "2023" / "day07"
    assert request.input_path == "/2023/day/7/input"


def test_year_defaults_to_current_year():
    assert ScaffoldRequest(day=1).year == current_year()


@pytest.mark.parametrize("day", [0, 26, -1])
def test_day_out_of_range_is_rejected(day):
    with pytest.raises(ValidationError):
        ScaffoldRequest(day=day, year=2024)


def test_year_before_first_event_is_rejected():
    with pytest.raises(ValidationError):
        ScaffoldRequest(day=1, year=2014)


def test_request_is_immutable():
    request = ScaffoldRequest(day=1, year=2024)

    with pytest.raises(ValidationError):
        request.day = 2
