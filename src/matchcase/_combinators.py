"""Guard composition: Boolean logic over predicates.

AllOf, AnyOf and Not compose any predicates (plain functions, text guards,
other combinators) with short-circuit evaluation. A member counts as
satisfied only when it returns exactly True, the same rule the dispatcher
applies to guard arms.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Callable

    GuardFn: TypeAlias = Callable[[Any], Any]


@dataclass(frozen=True, slots=True)
class AllOf:
    """All guards must hold (logical AND).

    Short-circuits on the first failure. Empty AllOf holds (vacuous truth).
    """

    guards: tuple[GuardFn, ...]

    def __call__(self, value: Any, /) -> bool:
        return all(g(value) is True for g in self.guards)


@dataclass(frozen=True, slots=True)
class AnyOf:
    """Any guard must hold (logical OR).

    Short-circuits on the first success. Empty AnyOf never holds.
    """

    guards: tuple[GuardFn, ...]

    def __call__(self, value: Any, /) -> bool:
        return any(g(value) is True for g in self.guards)


@dataclass(frozen=True, slots=True)
class Not:
    """Inverts the inner guard (logical NOT)."""

    guard: GuardFn

    def __call__(self, value: Any, /) -> bool:
        return self.guard(value) is not True


def always(value: Any, /) -> bool:
    """Catch-all guard."""
    return True


def all_of(guards: list[GuardFn], catch_all: GuardFn = always) -> GuardFn:
    """Compose guards with AND semantics, optimizing for common cases.

    - Empty -> catch_all (no conditions = match everything)
    - Single -> unwrapped
    - Multiple -> AllOf(guards)
    """
    if not guards:
        return catch_all
    if len(guards) == 1:
        return guards[0]
    return AllOf(tuple(guards))


def any_of(guards: list[GuardFn], catch_all: GuardFn = always) -> GuardFn:
    """Compose guards with OR semantics. Symmetric with all_of."""
    if not guards:
        return catch_all
    if len(guards) == 1:
        return guards[0]
    return AnyOf(tuple(guards))


def guard_depth(g: Any) -> int:
    """Calculate the nesting depth of a guard tree."""
    match g:
        case AllOf(guards=gs) | AnyOf(guards=gs):
            return 1 + max((guard_depth(sub) for sub in gs), default=0)
        case Not(guard=inner):
            return 1 + guard_depth(inner)
        case _:
            return 1
