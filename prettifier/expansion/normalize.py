"""Vertical whitespace normalization.

Itineraries may spell line breaks as textual escapes (``\\n``, ``\\r``,
``\\v``, ``\\f``) or contain raw vertical-tab, form-feed and carriage-return
characters. All of them become a single newline.
"""

from __future__ import annotations

import re

_VERTICAL_WHITESPACE = re.compile(r"\\[nrvf]|[\v\f\r]")


def normalize_line(line: str) -> str:
    """Replace every vertical-whitespace spelling in ``line`` with ``"\\n"``."""
    return _VERTICAL_WHITESPACE.sub("\n", line)


# Space and the ASCII control characters; Unicode spaces such as U+00A0 stay.
TRIM_CHARACTERS = "".join(map(chr, range(0x21)))


def trim_line(line: str) -> str:
    """Strip leading and trailing characters up to and including U+0020."""
    return line.strip(TRIM_CHARACTERS)
