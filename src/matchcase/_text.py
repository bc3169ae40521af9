"""Text guards: callable string predicates for use as match expressions.

Every guard here is a frozen dataclass built from a pattern and an optional
ignore_case flag, then called with the value under match. Non-string values
never match, so text guards stay total like the predicates in
matchcase._guards.

Construction enforces a pattern length limit (MAX_PATTERN_LENGTH, or
MAX_REGEX_PATTERN_LENGTH for Regex) whether a guard is built directly or
loaded by the registry.

Regex compiles with ``google-re2``, which matches in linear time. RE2 has no
backreferences or lookaround, so patterns using them fail at construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

import re2

from matchcase._errors import GuardError, PatternTooLongError

MAX_PATTERN_LENGTH = 8192
MAX_REGEX_PATTERN_LENGTH = 4096


@dataclass(frozen=True, slots=True)
class TextGuard:
    """Base for pattern-driven string guards.

    Subclasses decide how a candidate string is tested against the prepared
    pattern. With ignore_case the pattern is casefolded once here and each
    candidate is casefolded per call.
    """

    pattern: str
    ignore_case: bool = False
    _prepared: Any = field(init=False, repr=False, compare=False)

    max_length: ClassVar[int] = MAX_PATTERN_LENGTH

    def __post_init__(self) -> None:
        if not isinstance(self.pattern, str):
            msg = f"{type(self).__name__} pattern must be a string, got {type(self.pattern).__name__}"
            raise GuardError(msg)
        if len(self.pattern) > self.max_length:
            raise PatternTooLongError(len(self.pattern), self.max_length)
        object.__setattr__(self, "_prepared", self._prepare())

    def __call__(self, value: Any, /) -> bool:
        if not isinstance(value, str):
            return False
        return self._test(self._fold(value))

    def _fold(self, text: str) -> str:
        return text.casefold() if self.ignore_case else text

    def _prepare(self) -> Any:
        return self._fold(self.pattern)

    def _test(self, candidate: str) -> bool:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Exact(TextGuard):
    """Whole string equals the pattern (casefold makes "STRAßE" equal "strasse")."""

    def _test(self, candidate: str) -> bool:
        return candidate == self._prepared


@dataclass(frozen=True, slots=True)
class Prefix(TextGuard):
    def _test(self, candidate: str) -> bool:
        return candidate.startswith(self._prepared)


@dataclass(frozen=True, slots=True)
class Suffix(TextGuard):
    def _test(self, candidate: str) -> bool:
        return candidate.endswith(self._prepared)


@dataclass(frozen=True, slots=True)
class Contains(TextGuard):
    def _test(self, candidate: str) -> bool:
        return self._prepared in candidate


@dataclass(frozen=True, slots=True)
class Regex(TextGuard):
    """Pattern found anywhere in the string (search, not fullmatch).

    ignore_case compiles the pattern with RE2's ``(?i)`` flag instead of
    folding the candidate.

    Raises:
        GuardError: the pattern is not valid RE2 syntax.
    """

    max_length: ClassVar[int] = MAX_REGEX_PATTERN_LENGTH

    def _fold(self, text: str) -> str:
        return text

    def _prepare(self) -> Any:
        source = f"(?i){self.pattern}" if self.ignore_case else self.pattern
        try:
            return re2.compile(source)
        except re2.error as e:
            msg = f'invalid regex pattern "{self.pattern}": {e}'
            raise GuardError(msg) from e

    def _test(self, candidate: str) -> bool:
        return self._prepared.search(candidate) is not None
