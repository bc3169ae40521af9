"""Match arms: the DEFAULT sentinel, tagged expressions and normalization.

An arm pairs a match expression with an evaluation. Expressions are tagged
once, when arms are normalized, so selection never has to re-test what
kind of expression it is looking at:

    Default()      the fallback arm (expression was DEFAULT)
    Guard(fn)      expression was callable; matches when fn(value) is True
    Literal(value) anything else; matches by strict equality
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final, TypeAlias, final

from matchcase._guards import is_array, is_function

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping


@final
class _DefaultType:
    """Type of the DEFAULT sentinel. Has exactly one instance."""

    __slots__ = ()
    _instance: _DefaultType | None = None

    def __new__(cls) -> _DefaultType:
        if cls._instance is None:
            cls._instance = object.__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "DEFAULT"

    def __reduce__(self) -> str:
        # pickles by reference to the module-level name
        return "DEFAULT"

    def __copy__(self) -> _DefaultType:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _DefaultType:
        return self


DEFAULT: Final = _DefaultType()
"""Marks the fallback arm of a matcher."""


@dataclass(frozen=True, slots=True)
class Default:
    """Tag for the fallback arm."""


@dataclass(frozen=True, slots=True)
class Guard:
    """Tag for a predicate expression."""

    fn: Callable[[Any], Any]

    def matches(self, value: Any) -> bool:
        return self.fn(value) is True


@dataclass(frozen=True, slots=True)
class Literal:
    """Tag for a value compared by strict equality."""

    value: Any


Expression: TypeAlias = Default | Guard | Literal


def tag_expression(expression: Any) -> Expression:
    """Classify a raw match expression into its tagged form."""
    if expression is DEFAULT:
        return Default()
    if is_function(expression):
        return Guard(expression)
    return Literal(expression)


@dataclass(frozen=True, slots=True)
class MatchArm:
    """One (expression, evaluation) pair.

    A callable evaluation is invoked with the matched value; anything else
    is returned as is.
    """

    expression: Expression
    evaluation: Any

    @classmethod
    def of(cls, expression: Any, evaluation: Any) -> MatchArm:
        return cls(tag_expression(expression), evaluation)

    @property
    def is_default(self) -> bool:
        return isinstance(self.expression, Default)

    def produce(self, value: Any) -> Any:
        if is_function(self.evaluation):
            return self.evaluation(value)
        return self.evaluation


def normalize_basic(arms: Mapping[Any, Any]) -> tuple[MatchArm, ...]:
    """One arm per key, in the mapping's iteration order."""
    return tuple(MatchArm.of(key, arms[key]) for key in arms)


def normalize_advanced(entries: Iterable[Any]) -> tuple[MatchArm, ...]:
    """One arm per ``[expression, evaluation]`` entry.

    Entries that are not two-item sequences are dropped.
    """
    return tuple(
        MatchArm.of(entry[0], entry[1])
        for entry in entries
        if is_array(entry) and len(entry) == 2
    )
