"""Immutable domain models for the itinerary prettifier.

The airport directory is built once per run and then only read, so it is
a frozen dataclass over read-only mapping proxies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

# Separator between the airport name and the "(city, country)" part.
NAME_CITY_SEPARATOR = " ("


class CodeKind(Enum):
    """Airport code families recognized in itinerary markup."""

    IATA = "#"
    ICAO = "##"

    @property
    def prefix(self) -> str:
        """Markup prefix of a token of this kind."""
        return self.value


def describe_airport(name: str, city: str, country: str) -> str:
    """Build the directory description ``"name (city, country)"``."""
    return f"{name}{NAME_CITY_SEPARATOR}{city}, {country})"


@dataclass(frozen=True, slots=True)
class AirportDirectory:
    """Code to description lookup tables.

    Attributes:
        by_iata: 3-letter IATA code -> "name (city, country)"
        by_icao: 4-letter ICAO code -> "name (city, country)"
    """

    by_iata: Mapping[str, str] = field(default_factory=dict)
    by_icao: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Copy into read-only views so callers cannot mutate the tables.
        object.__setattr__(self, "by_iata", MappingProxyType(dict(self.by_iata)))
        object.__setattr__(self, "by_icao", MappingProxyType(dict(self.by_icao)))

    def resolve(self, code: str, kind: CodeKind) -> Optional[str]:
        """Return the description for ``code``, or None if it is unknown."""
        table = self.by_iata if kind is CodeKind.IATA else self.by_icao
        return table.get(code)

    @property
    def size(self) -> int:
        """Total number of codes across both tables."""
        return len(self.by_iata) + len(self.by_icao)


@dataclass(frozen=True, slots=True)
class AirportLabel:
    """The two substitutable parts of an airport description.

    Attributes:
        name_part: Airport name, used for plain tokens
        city_part: "city, country", used for ``*``-prefixed tokens
        resolved: False when the label is the fallback for an unknown code
    """

    name_part: str
    city_part: str
    resolved: bool = True

    @classmethod
    def fallback(cls, code: str, kind: CodeKind) -> AirportLabel:
        """Label used when ``code`` is missing from the directory."""
        return cls(name_part=f"{kind.prefix}{code}", city_part=code, resolved=False)

    @classmethod
    def from_description(
        cls, description: Optional[str], code: str, kind: CodeKind
    ) -> AirportLabel:
        """Split a description once on ``" ("``.

        A missing description, or one without the separator, yields the
        fallback label.
        """
        if description is None:
            return cls.fallback(code, kind)
        name, sep, rest = description.partition(NAME_CITY_SEPARATOR)
        if not sep:
            return cls.fallback(code, kind)
        return cls(name_part=name, city_part=rest.removesuffix(")"))

    def pick(self, city_only: bool) -> str:
        return self.city_part if city_only else self.name_part
