"""Grapheme segmentation and single code point classification.

Grapheme clusters come from the `regex` module's ``\\X``, which follows the
extended grapheme cluster rules of UAX #29, so emoji ZWJ sequences, skin
tone modifiers, flags and combining marks all come out as one segment.
"""

from __future__ import annotations

from attrs import frozen

from .constants import DIGITS, GRAPHEME_REGEX, WHITESPACE_REGEX


@frozen
class Segment:
    """One grapheme cluster and its offset into the segmented text."""
    text: str
    index: int

    @property
    def end(self) -> int:
        return self.index + len(self.text)


def segment(text: str) -> list[Segment]:
    if not text:
        return []
    return [Segment(match.group(), match.start()) for match in GRAPHEME_REGEX.finditer(text)]


def graphemes(text: str) -> list[str]:
    if not text:
        return []
    return GRAPHEME_REGEX.findall(text)


def is_whitespace(unit: str | None) -> bool:
    """Whether the unit (a code point or a whole grapheme) contains whitespace."""
    return bool(unit) and WHITESPACE_REGEX.search(unit) is not None


def is_digit(unit: str | None) -> bool:
    # ASCII only, unlike str.isdigit
    return bool(unit) and len(unit) == 1 and unit in DIGITS
