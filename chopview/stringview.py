# Grown out of https://gist.github.com/saxbophone/e988cef9f351863f4312f2eef41a3a83

from __future__ import annotations

from typing import Iterator

from attrs import define

from . import errors
from .numeric import scan_float, scan_int
from .segmenter import Segment, graphemes, is_whitespace, segment
from .types import Predicate, Result


@define(eq=False)
class StringView:
    """
    StringView implementation using minimal copying with maximum use of
    reference semantics. A view is a window (start, size) over a source
    string that is shared, never copied and never modified. Creating a
    sub-view, chopping, or trimming only moves window offsets around; a new
    string object is only created when the view is materialized through
    `data` or by casting it to str.

    Offsets and sizes count code points. Everything user-facing that talks
    about "characters" (char_at, iteration, chop_left, chop_right, trimming)
    counts grapheme clusters instead, using a segmentation of the current
    window that is computed lazily and thrown away whenever the window moves.
    """
    __source: str
    __start: int
    __size: int
    __segments: list[Segment] | None
    __grapheme_count: int | None
    __trimmed_bounds: tuple[int, int] | None

    def __init__(self, source: str | StringView = "", start: int = 0, size: int | None = None):
        if isinstance(source, StringView):
            self.__source = source.__source
            self.__start = source.__start + start
            self.__size = source.__size - start if size is None else size
        else:
            self.__source = source
            self.__start = start
            self.__size = len(source) - start if size is None else size
        assert 0 <= self.__start and 0 <= self.__size and self.__start + self.__size <= len(self.__source), \
            f"Window ({self.__start}, {self.__size}) is out of bounds for a source of length {len(self.__source)}"
        self.__invalidate()

    @classmethod
    def from_view(cls, view: StringView) -> StringView:
        return cls(view)

    @classmethod
    def from_parts(cls, source: str, start: int, size: int) -> StringView:
        return cls(source, start, size)

    def __str__(self):
        return self.data

    def __repr__(self):
        return f'<StringView: {self.data!r}>'

    def __len__(self):
        return self.__size

    def __iter__(self) -> Iterator[str]:
        for seg in self.__get_segments():
            yield seg.text

    #region State

    @property
    def source(self) -> str:
        return self.__source

    @property
    def start(self) -> int:
        return self.__start

    @property
    def size(self) -> int:
        return self.__size

    @property
    def data(self) -> str:
        """The current window as a new string. This is the only place the view allocates one."""
        return self.__source[self.__start:self.__start + self.__size]

    @property
    def grapheme_length(self) -> int:
        if self.__grapheme_count is None:
            self.__grapheme_count = len(self.__get_segments())
        return self.__grapheme_count

    def state(self) -> dict:
        return {"source": self.__source, "start": self.__start, "size": self.__size}

    def reset(self, source: str | None = None) -> None:
        """Points the view at the whole of `source`, or back at the whole of its current source."""
        if source is not None:
            self.__source = source
        self.__move(0, len(self.__source))

    def copy_from(self, other: StringView) -> None:
        state = other.state()
        self.__source = state["source"]
        self.__move(state["start"], state["size"])

    def dispose(self) -> None:
        self.__invalidate()

    #endregion

    #region Segment cache

    def __invalidate(self):
        self.__segments = None
        self.__grapheme_count = None
        self.__trimmed_bounds = None

    def __move(self, start: int, size: int):
        self.__start = start
        self.__size = size
        self.__invalidate()

    def __get_segments(self) -> list[Segment]:
        if self.__segments is None:
            self.__segments = segment(self.data)
        return self.__segments

    def __get_trimmed_bounds(self) -> tuple[int, int]:
        if self.__trimmed_bounds is None:
            segments = self.__get_segments()
            first, last = 0, len(segments) - 1
            while first <= last and is_whitespace(segments[first].text):
                first += 1
            while last >= first and is_whitespace(segments[last].text):
                last -= 1
            self.__trimmed_bounds = (first, last)
        return self.__trimmed_bounds

    @staticmethod
    def __segment_at(segments: list[Segment], index: int) -> Segment:
        if not 0 <= index < len(segments):
            raise errors.SegmentIndexError(index, len(segments))
        return segments[index]

    #endregion

    #region Reads

    def char_at(self, index: int) -> str:
        """Returns the grapheme at `index`, or an empty string if there is none."""
        if index < 0:
            return ""
        segments = self.__get_segments()
        if index >= len(segments):
            return ""
        return segments[index].text

    def index_of(self, needle: str | StringView) -> int:
        return self.data.find(_text(needle))

    def eq(self, other: str | StringView) -> bool:
        return self.data == _text(other)

    def eq_ignore_case(self, other: str | StringView) -> bool:
        return self.data.lower() == _text(other).lower()

    def starts_with(self, other: str | StringView) -> bool:
        return self.data.startswith(_text(other))

    def ends_with(self, other: str | StringView) -> bool:
        return self.data.endswith(_text(other))

    def take_left_while(self, predicate: Predicate) -> StringView:
        i = self.__count_left(predicate)
        return StringView.from_parts(self.__source, self.__start, i)

    def take_right_while(self, predicate: Predicate) -> StringView:
        i = self.__count_right(predicate)
        return StringView.from_parts(self.__source, self.__start + self.__size - i, i)

    def __count_left(self, predicate: Predicate) -> int:
        source, start = self.__source, self.__start
        i = 0
        while i < self.__size and predicate(source[start + i]):
            i += 1
        return i

    def __count_right(self, predicate: Predicate) -> int:
        source, end = self.__source, self.__start + self.__size
        i = 0
        while i < self.__size and predicate(source[end - i - 1]):
            i += 1
        return i

    #endregion

    #region Trimming

    def trim_left(self) -> StringView:
        """Skips leading whitespace graphemes. Unlike trim_right and trim, this moves the view itself."""
        offset = self.__size
        for seg in self.__get_segments():
            if not is_whitespace(seg.text):
                offset = seg.index
                break
        self.__move(self.__start + offset, self.__size - offset)
        return self

    def trim_right(self) -> StringView:
        """Returns a new view without trailing whitespace graphemes."""
        segments = segment(self.data)
        i = len(segments) - 1
        while i >= 0 and is_whitespace(segments[i].text):
            i -= 1
        size = segments[i].end if i >= 0 else 0
        return StringView.from_parts(self.__source, self.__start, size)

    def trim(self) -> StringView:
        """Returns a new view without leading or trailing whitespace graphemes."""
        first, last = self.__get_trimmed_bounds()
        if first > last:
            return StringView.from_parts(self.__source, self.__start, 0)
        segments = self.__get_segments()
        offset = self.__segment_at(segments, first).index
        end = self.__segment_at(segments, last).end
        return StringView.from_parts(self.__source, self.__start + offset, end - offset)

    #endregion

    #region Chopping

    def __chop_all(self) -> StringView:
        result = StringView(self)
        self.__move(self.__start + self.__size, 0)
        return result

    def chop_left_while(self, predicate: Predicate) -> StringView:
        """Chops off the longest prefix of code points that satisfy `predicate` and returns it."""
        i = self.__count_left(predicate)
        result = StringView.from_parts(self.__source, self.__start, i)
        self.__move(self.__start + i, self.__size - i)
        return result

    def chop_right_while(self, predicate: Predicate) -> StringView:
        i = self.__count_right(predicate)
        result = StringView.from_parts(self.__source, self.__start + self.__size - i, i)
        self.__move(self.__start, self.__size - i)
        return result

    def chop_left(self, count: int) -> StringView:
        """Chops off the first `count` graphemes and returns them.

        Nothing is chopped if `count` is zero or negative, and everything is
        chopped if it's at least the grapheme length.
        """
        if count <= 0:
            return StringView.from_parts(self.__source, self.__start, 0)
        segments = self.__get_segments()
        if count >= len(segments):
            return self.__chop_all()
        offset = segments[count - 1].end
        result = StringView.from_parts(self.__source, self.__start, offset)
        self.__move(self.__start + offset, self.__size - offset)
        return result

    def chop_right(self, count: int) -> StringView:
        """Chops off the last `count` graphemes and returns them."""
        if count <= 0:
            return StringView.from_parts(self.__source, self.__start, 0)
        segments = segment(self.data)
        if count >= len(segments):
            return self.__chop_all()
        offset = segments[len(segments) - count].index
        result = StringView.from_parts(self.__source, self.__start + offset, self.__size - offset)
        self.__move(self.__start, offset)
        return result

    def __find_delimiter(self, delim: str) -> tuple[int, int] | None:
        """Grapheme-aware delimiter search over a fresh segmentation of the window.

        Returns the size of the prefix before the delimiter and the offset
        just past it, or None if the delimiter doesn't occur.
        """
        segments = segment(self.data)
        delim_length = len(graphemes(delim))
        for i in range(len(segments)):
            candidate = "".join(seg.text for seg in segments[i:i + delim_length])
            if candidate == delim:
                after = i + delim_length
                advance = segments[after].index if after < len(segments) else self.__size
                return segments[i].index, advance
        return None

    def chop_by_delimiter(self, delim: str) -> StringView:
        """
        Chops off everything before `delim` and returns it, moving the view
        past the delimiter. If the delimiter isn't found the whole view is
        chopped. The delimiter may span several graphemes, but it only
        matches on grapheme boundaries.
        """
        found = self.__find_delimiter(delim)
        if found is None:
            return self.__chop_all()
        prefix, advance = found
        result = StringView.from_parts(self.__source, self.__start, prefix)
        self.__move(self.__start + advance, self.__size - advance)
        return result

    def try_chop_by_delimiter(self, delim: str) -> Result[StringView]:
        """Like chop_by_delimiter, but fails without touching the view if `delim` is missing."""
        found = self.__find_delimiter(delim)
        if found is None:
            return Result.fail()
        prefix, advance = found
        result = StringView.from_parts(self.__source, self.__start, prefix)
        self.__move(self.__start + advance, self.__size - advance)
        return Result.ok(result)

    def chop_by_string_view(self, delim: str | StringView) -> StringView:
        """
        Chops at the first occurrence of `delim`, comparing raw code point
        windows instead of graphemes. The final window position is never
        compared: if the scan reaches it, the returned view runs to the end
        of this one (delimiter included) and this view becomes empty.
        """
        needle = _text(delim)
        width = len(needle)
        if width > self.__size:
            return self.__chop_all()
        i = 0
        while i + width < self.__size and not self.__source.startswith(
                needle, self.__start + i, self.__start + i + width):
            i += 1
        prefix = i + width if i + width == self.__size else i
        result = StringView.from_parts(self.__source, self.__start, prefix)
        self.__move(self.__start + i + width, self.__size - i - width)
        return result

    def try_chop_by_string_view(self, delim: str | StringView) -> Result[StringView]:
        """Code point delimiter search that checks every position and fails without touching the view."""
        needle = _text(delim)
        offset = self.__source.find(needle, self.__start, self.__start + self.__size)
        if offset < 0:
            return Result.fail()
        i = offset - self.__start
        result = StringView.from_parts(self.__source, self.__start, i)
        self.__move(offset + len(needle), self.__size - i - len(needle))
        return Result.ok(result)

    #endregion

    #region Numbers

    def to_int(self) -> int:
        """Parses a signed integer from the start of the view. Returns 0 if there are no digits."""
        value, _, found = scan_int(self.__source, self.__start, self.__start + self.__size)
        return value if found else 0

    def to_float(self) -> float:
        value, _, found = scan_float(self.__source, self.__start, self.__start + self.__size)
        return value if found else 0.0

    def chop_int(self) -> Result[int]:
        value, consumed, found = scan_int(self.__source, self.__start, self.__start + self.__size)
        if not found:
            return Result.fail()
        self.__move(self.__start + consumed, self.__size - consumed)
        return Result.ok(value)

    def chop_float(self) -> Result[float]:
        value, consumed, found = scan_float(self.__source, self.__start, self.__start + self.__size)
        if not found:
            return Result.fail()
        self.__move(self.__start + consumed, self.__size - consumed)
        return Result.ok(value)

    #endregion


def _text(value: str | StringView) -> str:
    return value.data if isinstance(value, StringView) else value
