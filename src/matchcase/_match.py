"""Dispatcher: pick the first arm that matches a value.

Two entry points share the same selection rules:

- ``match(value)(matcher, *more)`` normalizes and validates the matcher on
  every call. The matcher is either a record ``{expression: evaluation}``
  (basic form) or a sequence of ``[expression, evaluation]`` entries,
  possibly spread over several arguments (advanced form).
- ``MatchTable`` holds arms that were normalized and validated once and
  can be evaluated against many values.

Selection semantics:
- Arms are scanned in order, skipping default arms (first-match-wins)
- A guard arm matches only when its predicate returns exactly True
- A literal arm matches by strict equality (see is_equal)
- With no explicit match, the first DEFAULT arm is selected
- Errors from guards and evaluations propagate unchanged
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from matchcase._arms import Guard, Literal, MatchArm, normalize_advanced, normalize_basic
from matchcase._errors import (
    EmptyMatcherError,
    MatcherTypeError,
    MissingDefaultError,
    TooManyArmsError,
    raise_if_empty,
    raise_if_missing,
)
from matchcase._guards import is_array, is_equal, is_object

logger = logging.getLogger(__name__)

MAX_ARMS = 256


def match(value: Any) -> Match:
    """Start a match on value.

    >>> from matchcase import DEFAULT, match
    >>> match(5)({DEFAULT: "other", 5: "five"})
    'five'
    """
    return Match(value)


@dataclass(frozen=True, slots=True)
class Match:
    """A value waiting for its matcher."""

    value: Any

    def __call__(self, matcher: Any, /, *more: Any) -> Any:
        arms = normalize(matcher, *more)
        default = _validate(arms)
        return _select(arms, default, self.value).produce(self.value)


@dataclass(frozen=True, slots=True)
class MatchTable:
    """Pre-validated, reusable set of arms.

    Validation runs at construction: an empty table, a table without a
    DEFAULT arm, or one wider than MAX_ARMS is rejected.

    >>> from matchcase import DEFAULT, is_positive_integer
    >>> table = MatchTable.from_arms([is_positive_integer, "pos"], [DEFAULT, "other"])
    >>> table(-1)
    'other'
    """

    arms: tuple[MatchArm, ...]
    _default: MatchArm = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.arms) > MAX_ARMS:
            raise TooManyArmsError(len(self.arms), MAX_ARMS)
        object.__setattr__(self, "_default", _validate(self.arms))

    @classmethod
    def from_arms(cls, matcher: Any, /, *more: Any) -> MatchTable:
        """Build a table from the same shapes ``match(value)(...)`` accepts."""
        return cls(normalize(matcher, *more))

    def evaluate(self, value: Any) -> Any:
        return _select(self.arms, self._default, value).produce(value)

    def __call__(self, value: Any) -> Any:
        return self.evaluate(value)


def normalize(matcher: Any, /, *more: Any) -> tuple[MatchArm, ...]:
    """Turn a basic or advanced matcher into an ordered tuple of arms.

    The advanced form is accepted two ways: entries spread over the
    arguments (``[1, "one"], [DEFAULT, "other"]``) or one sequence holding
    them (``[[1, "one"], [DEFAULT, "other"]]``). A matcher is read as a
    spread entry only when it is itself a pair whose expression is not a
    sequence; otherwise its items are the entries, and invalid ones are
    dropped like any other.

    Raises:
        MatcherTypeError: matcher is neither a record nor a sequence.
    """
    if is_object(matcher):
        return normalize_basic(matcher)
    if is_array(matcher):
        if _is_spread_pair(matcher):
            return normalize_advanced((matcher, *more))
        return normalize_advanced((*matcher, *more))
    msg = f"matcher must be a record or a sequence, got {type(matcher).__name__}"
    raise MatcherTypeError(msg)


def _is_spread_pair(matcher: Any) -> bool:
    return len(matcher) == 2 and not is_array(matcher[0])


def _validate(arms: tuple[MatchArm, ...]) -> MatchArm:
    """Check arms are usable and return the default arm."""
    raise_if_empty(arms, "matcher has to contain at least one arm", EmptyMatcherError)
    default = next((arm for arm in arms if arm.is_default), None)
    return raise_if_missing(default, "matcher needs a DEFAULT arm", MissingDefaultError)


def _select(arms: tuple[MatchArm, ...], default: MatchArm, value: Any) -> MatchArm:
    for index, arm in enumerate(arms):
        if _arm_matches(arm, value):
            logger.debug("arm %d selected for %r", index, value)
            return arm
    logger.debug("no explicit arm matched %r, using DEFAULT", value)
    return default


def _arm_matches(arm: MatchArm, value: Any) -> bool:
    match arm.expression:
        case Guard() as guard:
            return guard.matches(value)
        case Literal(value=literal):
            return is_equal(literal, value)
    return False  # Default arms never match explicitly
