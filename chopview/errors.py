class ChopviewError(Exception):
    """Base class for every error raised by chopview."""


class ResultError(ChopviewError, ValueError):
    """Raised when unwrapping a failed Result."""

    def __init__(self, message: str = "Result has no data") -> None:
        super().__init__(message)


class SegmentIndexError(ChopviewError, IndexError):
    """A segment index that should always exist was missing.

    This means the view's window and its segmentation disagree, which only
    happens if an internal invariant was broken.
    """

    def __init__(self, index: int, count: int) -> None:
        self.index = index
        self.count = count
        super().__init__(f"Invalid segment index {index} (view has {count} segments)")


class ExtractionError(ChopviewError):
    """Base class for token extraction failures."""


class LiteralNotFound(ExtractionError):
    def __init__(self, literal: str, remaining: str) -> None:
        self.literal = literal
        self.remaining = remaining
        super().__init__(f"Literal {literal!r} not found in {remaining!r}")


class TokenParseError(ExtractionError, ValueError):
    def __init__(self, kind: str, remaining: str) -> None:
        self.kind = kind
        self.remaining = remaining
        super().__init__(f"Failed to parse {kind} from {remaining!r}")


class ReentrantExtraction(ExtractionError, RuntimeError):
    def __init__(self) -> None:
        super().__init__("Token extractor is already running; extractors are not reentrant")
