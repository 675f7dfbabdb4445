from __future__ import annotations

from typing import Any, Callable

from . import errors
from .segmenter import is_whitespace
from .stringview import StringView
from .types import TokenParser


def parse_int(view: StringView) -> int:
    result = view.chop_int()
    if not result.success:
        raise errors.TokenParseError("integer", view.data)
    return result.data


def parse_float(view: StringView) -> float:
    result = view.chop_float()
    if not result.success:
        raise errors.TokenParseError("float", view.data)
    return result.data


def parse_word(view: StringView) -> str:
    return str(view.chop_left_while(lambda c: not is_whitespace(c)))


def parse_optional(view: StringView) -> str:
    """One grapheme, or nothing if the view starts with whitespace."""
    if is_whitespace(view.char_at(0)):
        return ""
    return str(view.chop_left(1))


PRIMITIVE_PARSERS: dict[type, TokenParser] = {
    int: parse_int,
    float: parse_float,
    str: parse_word,
}


def get_parser(spec: type | Callable[[StringView], Any]) -> TokenParser:
    if isinstance(spec, type) and spec in PRIMITIVE_PARSERS:
        return PRIMITIVE_PARSERS[spec]
    if not callable(spec):
        raise TypeError(f"{spec!r} is not a token parser")
    return spec
