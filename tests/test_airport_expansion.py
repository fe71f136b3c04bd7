"""Tests for airport code expansion."""

import pytest

from prettifier.domain.models import AirportDirectory, AirportLabel, CodeKind
from prettifier.expansion.airports import (
    expand_airport_codes,
    expand_iata_codes,
    expand_icao_codes,
    resolve_label,
)


@pytest.fixture
def directory():
    return AirportDirectory(
        by_iata={
            "LAX": "Los Angeles Intl (Los Angeles, US)",
            "LHR": "Heathrow (London, GB)",
        },
        by_icao={
            "KLAX": "Los Angeles Intl (Los Angeles, US)",
            "EGLL": "Heathrow (London, GB)",
        },
    )


class TestIataTokens:
    def test_plain_token_gives_airport_name(self, directory):
        assert expand_airport_codes("#LAX", directory) == "Los Angeles Intl"

    def test_starred_token_gives_city_and_country(self, directory):
        assert expand_airport_codes("*#LAX", directory) == "Los Angeles, US"

    def test_unknown_code_falls_back(self, directory):
        assert expand_airport_codes("#ZZZ", directory) == "#ZZZ"
        assert expand_airport_codes("*#ZZZ", directory) == "ZZZ"

    def test_lowercase_code_is_not_a_token(self, directory):
        assert expand_airport_codes("#lax", directory) == "#lax"

    def test_tokens_inside_sentence(self, directory):
        line = "Fly from #LHR (*#LHR) to #LAX."

        assert expand_airport_codes(line, directory) == (
            "Fly from Heathrow (London, GB) to Los Angeles Intl."
        )


class TestIcaoTokens:
    def test_plain_token_gives_airport_name(self, directory):
        assert expand_airport_codes("##EGLL", directory) == "Heathrow"

    def test_starred_token_gives_city_and_country(self, directory):
        assert expand_airport_codes("*##EGLL", directory) == "London, GB"

    def test_unknown_code_keeps_its_prefix(self, directory):
        assert expand_airport_codes("##JFKX", directory) == "##JFKX"

    def test_unknown_starred_code_gives_bare_code(self, directory):
        assert expand_airport_codes("*##JFKX", directory) == "JFKX"

    def test_icao_pass_alone_leaves_iata_tokens(self, directory):
        assert expand_icao_codes("##EGLL #LAX", directory) == "Heathrow #LAX"


def test_iata_pass_runs_over_icao_output():
    directory = AirportDirectory(
        by_iata={"JFK": "John F Kennedy Intl (New York, US)"},
    )

    # "##JFKX" is unknown as ICAO, and its fallback exposes "#JFK".
    assert expand_airport_codes("##JFKX", directory) == "#John F Kennedy IntlX"


def test_iata_pass_does_not_rescan_its_own_output():
    directory = AirportDirectory(
        by_iata={"AAA": "#BBB (Here, US)", "BBB": "Bee (There, US)"},
    )

    assert expand_iata_codes("#AAA", directory) == "#BBB"


def test_replacement_text_is_literal():
    directory = AirportDirectory(by_iata={"ABC": r"Odd \1 $0 \g<0> (City, XX)"})

    assert expand_airport_codes("#ABC", directory) == r"Odd \1 $0 \g<0>"


def test_description_without_separator_is_treated_as_unknown():
    directory = AirportDirectory(by_iata={"ABC": "Plain Name"})

    assert expand_airport_codes("#ABC", directory) == "#ABC"
    assert expand_airport_codes("*#ABC", directory) == "ABC"


def test_city_part_only_strips_trailing_parenthesis():
    label = AirportLabel.from_description("Name (City (Old), XX)", "ABC", CodeKind.IATA)

    assert label.name_part == "Name"
    assert label.city_part == "City (Old), XX"


def test_resolve_label_marks_fallbacks(directory):
    assert resolve_label(directory, "LAX", CodeKind.IATA).resolved
    fallback = resolve_label(directory, "LAX", CodeKind.ICAO)

    assert fallback == AirportLabel("##LAX", "LAX", resolved=False)
