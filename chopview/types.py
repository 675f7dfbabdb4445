from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from attrs import frozen

from . import errors

if TYPE_CHECKING:
    from .stringview import StringView

T = TypeVar("T")

Predicate = Callable[[str], bool]
TokenParser = Callable[["StringView"], Any]


@frozen
class Result(Generic[T]):
    """Outcome of a fallible operation.

    `data` is only meaningful when `success` is true. Fallible chops return
    one of these instead of raising, and never touch the view on failure.
    """
    success: bool
    data: T | None = None

    @classmethod
    def ok(cls, data: T) -> Result[T]:
        return cls(True, data)

    @classmethod
    def fail(cls) -> Result[T]:
        return _FAILURE

    def unwrap(self) -> T:
        if not self.success:
            raise errors.ResultError()
        return self.data

    def __bool__(self):
        return self.success


_FAILURE = Result(False)
