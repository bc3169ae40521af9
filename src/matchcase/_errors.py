"""Error taxonomy and fail-fast helpers.

Every error raised by matchcase derives from MatchError. The dispatcher's
validation failures additionally derive from the matching builtin
(TypeError, ValueError, LookupError) so callers can catch them either way.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from matchcase._guards import is_missing, is_non_empty_array

if TYPE_CHECKING:
    from collections.abc import Sequence

T = TypeVar("T")


class MatchError(Exception):
    """Base class for matchcase errors."""


class MatcherTypeError(MatchError, TypeError):
    """The matcher is neither a record nor a sequence."""


class EmptyMatcherError(MatchError, ValueError):
    """The matcher normalized to zero arms."""


class MissingDefaultError(MatchError, LookupError):
    """The matcher has no DEFAULT arm."""


class MissingValueError(MatchError, LookupError):
    """A required value was None."""


class TooManyArmsError(MatchError, ValueError):
    """A match table is wider than MAX_ARMS."""

    def __init__(self, count: int, max_: int) -> None:
        self.count = count
        self.max = max_
        super().__init__(f"too many arms: {count} exceeds maximum {max_}")


class GuardError(MatchError):
    """A guard could not be built or loaded."""


class PatternTooLongError(GuardError):
    """A text guard pattern exceeds its length limit."""

    def __init__(self, length: int, max_: int) -> None:
        self.length = length
        self.max = max_
        super().__init__(f"pattern length {length} exceeds maximum {max_}")


def raise_if_empty(
    items: Sequence[T],
    message: str,
    error: type[Exception] = EmptyMatcherError,
) -> Sequence[T]:
    """Raise ``error(message)`` unless items is a non-empty array.

    Returns items unchanged so the call can be used inline.
    """
    if not is_non_empty_array(items):
        raise error(message)
    return items


def raise_if_missing(
    value: Any,
    message: str,
    error: type[Exception] = MissingValueError,
) -> Any:
    """Raise ``error(message)`` if value is missing, else return it."""
    if is_missing(value):
        raise error(message)
    return value
