from __future__ import annotations

from chopview.segmenter import Segment, graphemes, segment


def test_segment_ascii() -> None:
    assert segment("ab") == [Segment("a", 0), Segment("b", 1)]


def test_segment_empty() -> None:
    assert segment("") == []
    assert graphemes("") == []


def test_segment_offsets_count_code_points() -> None:
    family = "\U0001F468\u200d\U0001F469\u200d\U0001F467\u200d\U0001F466"
    segments = segment(f"{family}x")
    assert [s.text for s in segments] == [family, "x"]
    assert segments[1].index == len(family)
    assert segments[0].end == len(family)


def test_graphemes_keep_combining_marks() -> None:
    assert graphemes("e\u0301a") == ["e\u0301", "a"]


def test_crlf_is_one_grapheme() -> None:
    assert graphemes("a\r\nb") == ["a", "\r\n", "b"]
