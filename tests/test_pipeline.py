"""Integration tests for the line pipeline."""

import pytest

from prettifier.domain.models import AirportDirectory
from prettifier.pipeline import collapse_blank_lines, expand, prettify_line


@pytest.fixture
def directory():
    return AirportDirectory(
        by_iata={"LAX": "Los Angeles Intl (Los Angeles, US)"},
        by_icao={"EGLL": "Heathrow (London, GB)"},
    )


def test_full_itinerary(directory):
    lines = [
        "Your flight from *##EGLL to *#LAX",
        "Departure: ##EGLL, D(2024-03-15T10:00:00+00:00) T12(2024-03-15T10:00:00Z)",
        "",
        "",
        "",
        "Arrival: #LAX at T24(2024-03-15T13:20:00-07:00)   ",
    ]

    assert expand(lines, directory) == [
        "Your flight from London, GB to Los Angeles, US",
        "Departure: Heathrow, 15 Mar 2024 10:00am (00:00)",
        "",
        "Arrival: Los Angeles Intl at 13:20 (-07:00)",
    ]


def test_line_without_tokens_passes_through(directory):
    assert expand(["  Just text, nothing else.  "], directory) == [
        "Just text, nothing else."
    ]


def test_escaped_newline_is_expanded_before_tokens(directory):
    assert prettify_line("#LAX\\nD(2024-03-15T10:00:00Z)", directory) == (
        "Los Angeles Intl\n15 Mar 2024"
    )


def test_line_of_only_escapes_becomes_blank(directory):
    assert expand(["a", "\\n", "  ", "\\v\\f", "b"], directory) == ["a", "", "b"]


def test_leading_blank_line_is_kept(directory):
    assert expand(["", "", "", "text"], directory) == ["", "text"]


def test_trailing_blank_lines_collapse(directory):
    assert expand(["text", "", ""], directory) == ["text", ""]


def test_empty_input(directory):
    assert expand([], directory) == []


def test_collapse_blank_lines_keeps_non_blank_runs():
    assert list(collapse_blank_lines(["a", "b", "", "c", "", "", "d"])) == [
        "a",
        "b",
        "",
        "c",
        "",
        "d",
    ]


def test_rerunning_on_output_is_a_no_op(directory):
    lines = [
        "  ##EGLL -> *#LAX  ",
        "",
        "",
        "On D(2024-03-15T10:00:00+02:00) at T12(2024-03-15T18:30:00+02:00)",
        "Unknown: #ZZZ? maybe D(soon)",
    ]

    first = expand(lines, directory)

    assert expand(first, directory) == first


def test_non_breaking_space_line_is_not_blank(directory):
    assert expand(["a", "", "\u00a0", "", "b"], directory) == [
        "a",
        "",
        "\u00a0",
        "",
        "b",
    ]
