from __future__ import annotations

from logging import debug
from typing import Any, Callable, Iterable

from . import errors
from .stringview import StringView
from .tokens import get_parser
from .types import TokenParser

ParserSpec = type | Callable[[StringView], Any]


class TokenExtractor:
    """Pulls typed values out of text shaped like ``literal parser literal parser ... tail``.

    Each literal is skipped by searching for it (anything in front of it is
    discarded too), then the parser for that slot consumes what it wants from
    the head of the remaining text. The tail literal is kept for reference
    but isn't matched.

    The extractor keeps one scratch view for the input and one for the
    current literal and reuses them on every call, so a single extractor
    can't be used from inside one of its own parsers or from two threads.
    """

    literals: tuple[str, ...]
    parsers: tuple[TokenParser, ...]

    def __init__(self, pairs: Iterable[tuple[str, ParserSpec]], tail: str = ""):
        pairs = list(pairs)
        self.literals = tuple(literal for literal, _ in pairs) + (tail,)
        self.parsers = tuple(get_parser(parser) for _, parser in pairs)
        self._buffer = StringView()
        self._delimiter = StringView()
        self._running = False
        debug(f"Compiled token extractor {self!r}")

    def __repr__(self):
        parts = []
        for literal, parser in zip(self.literals, self.parsers):
            parts.append(f"{literal!r} <{getattr(parser, '__name__', parser)}>")
        parts.append(repr(self.literals[-1]))
        return f"<TokenExtractor: {' '.join(parts)}>"

    def __len__(self):
        return len(self.parsers)

    def __call__(self, value: str | StringView) -> tuple:
        if self._running:
            raise errors.ReentrantExtraction()
        self._running = True
        try:
            return self._extract(value)
        finally:
            self._running = False

    def _extract(self, value: str | StringView) -> tuple:
        buffer = self._buffer
        if isinstance(value, StringView):
            buffer.copy_from(value)
        else:
            buffer.reset(value)

        results = []
        for literal, parser in zip(self.literals, self.parsers):
            self._delimiter.reset(literal)
            if not buffer.try_chop_by_string_view(self._delimiter):
                debug(f"Literal {literal!r} missing from {buffer.data!r}")
                raise errors.LiteralNotFound(literal, buffer.data)
            results.append(parser(buffer))
        return tuple(results)


def extract_tokens(*parts: str | ParserSpec) -> TokenExtractor:
    """Builds a TokenExtractor from alternating literals and parsers.

    ``extract_tokens("Hello ", int, " World")`` reads the integer out of
    ``"Hello 123 World"``. Two parsers in a row get an empty literal between
    them, and a parser at the very start gets an empty leading literal.
    """
    pairs = []
    literal = ""
    for part in parts:
        if isinstance(part, str):
            literal += part
        else:
            pairs.append((literal, part))
            literal = ""
    return TokenExtractor(pairs, literal)
