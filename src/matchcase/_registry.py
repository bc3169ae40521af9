"""Guard registry for config-driven match tables.

The registry turns a TableConfig into a MatchTable without any table
specific code: named guards are resolved through registered factories.

Architecture:
- RegistryBuilder → .build() → Registry (immutable)
- Factories are plain callables: (config: dict) → guard
- load_table() walks the config tree and constructs runtime arms

Example::

    builder = register_core_guards(RegistryBuilder())
    builder.guard("is_even", lambda cfg: lambda v: isinstance(v, int) and v % 2 == 0)
    registry = builder.build()

    table = registry.load_table(parse_table_config(data))
    table(4)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import partial
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeAlias

from matchcase import _guards
from matchcase._arms import Default, Guard, Literal, MatchArm
from matchcase._combinators import AllOf, AnyOf, Not
from matchcase._config import AllConfig, AnyConfig, EqualsConfig, GuardConfig, NotConfig
from matchcase._errors import GuardError, PatternTooLongError, TooManyArmsError
from matchcase._match import MAX_ARMS, MatchTable
from matchcase._text import Contains, Exact, Prefix, Regex, Suffix, TextGuard

if TYPE_CHECKING:
    from collections.abc import Callable

    from matchcase._config import ArmConfig, TableConfig, WhenConfig

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# Limits
# ═══════════════════════════════════════════════════════════════════════════════

MAX_DEPTH = 32
MAX_GUARDS_PER_COMPOUND = 256

# Zero-config predicates registered by register_core_guards, under their own names.
CORE_PREDICATES = (
    _guards.is_none,
    _guards.is_missing,
    _guards.is_present,
    _guards.is_boolean,
    _guards.is_array,
    _guards.is_object,
    _guards.is_string,
    _guards.is_number,
    _guards.is_function,
    _guards.is_non_empty_string,
    _guards.is_non_empty_array,
    _guards.is_true,
    _guards.is_positive_integer,
    _guards.is_non_negative_integer,
    _guards.has_one_item,
    _guards.has_multiple_items,
    _guards.is_constructable,
)

# Text guard name -> (guard type, config field holding the pattern).
_TEXT_GUARDS: dict[str, tuple[type[TextGuard], str]] = {
    "exact": (Exact, "value"),
    "prefix": (Prefix, "prefix"),
    "suffix": (Suffix, "suffix"),
    "contains": (Contains, "substring"),
    "regex": (Regex, "pattern"),
}

# ═══════════════════════════════════════════════════════════════════════════════
# Error types
# ═══════════════════════════════════════════════════════════════════════════════


class UnknownGuardError(GuardError):
    """A guard name was not found in the registry."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = sorted(available)
        if self.available:
            registered = ", ".join(self.available)
            msg = f"unknown guard: {name!r} (registered: {registered})"
        else:
            msg = f"unknown guard: {name!r} (no guards are registered)"
        super().__init__(msg)


class InvalidConfigError(GuardError):
    """A guard config payload was malformed or semantically invalid."""

    def __init__(self, source: str) -> None:
        self.source = source
        super().__init__(f"invalid config: {source}")


class TooManyGuardsError(GuardError):
    """Compound condition has too many children (width-based limit)."""

    def __init__(self, count: int, max_: int) -> None:
        self.count = count
        self.max = max_
        super().__init__(
            f"too many guards in compound: {count} exceeds maximum {max_}"
        )


class GuardTooDeepError(GuardError):
    """A condition tree nests deeper than MAX_DEPTH."""

    def __init__(self, depth: int, max_: int) -> None:
        self.depth = depth
        self.max = max_
        super().__init__(
            f"guard depth {depth} exceeds maximum allowed depth {max_}"
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Builder
# ═══════════════════════════════════════════════════════════════════════════════

GuardFactory: TypeAlias = "Callable[[dict[str, Any]], Callable[[Any], Any]]"


class RegistryBuilder:
    """Builder for constructing a Registry.

    Register guard factories by name, then call build() to produce an
    immutable Registry. Registering a name twice replaces the factory.
    """

    def __init__(self) -> None:
        self._guard_factories: dict[str, GuardFactory] = {}

    def guard(self, name: str, factory: GuardFactory) -> RegistryBuilder:
        """Register a guard factory under a name."""
        self._guard_factories[name] = factory
        return self

    def predicate(self, name: str, fn: Callable[[Any], Any]) -> RegistryBuilder:
        """Register a ready-made predicate that takes no config."""
        return self.guard(name, lambda config: _configless(name, config, fn))

    def build(self) -> Registry:
        """Freeze the registry. No further registration is possible."""
        return Registry(_guard_factories=MappingProxyType(dict(self._guard_factories)))


def register_core_guards(builder: RegistryBuilder) -> RegistryBuilder:
    """Register the built-in predicates and text guards.

    Predicates keep their function names (``is_positive_integer``, ...).
    Text guards take their fields from config:

    - exact: ``value``, prefix: ``prefix``, suffix: ``suffix``,
      contains: ``substring``, regex: ``pattern``
    - every text guard accepts an optional ``ignore_case`` bool
    """
    for fn in CORE_PREDICATES:
        builder.predicate(fn.__name__, fn)
    for name, (guard_type, key) in _TEXT_GUARDS.items():
        builder.guard(name, _text_factory(guard_type, key))
    return builder


# ═══════════════════════════════════════════════════════════════════════════════
# Registry
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Registry:
    """Immutable registry of guard factories.

    Constructed via RegistryBuilder. Use load_table() to compile config
    into a MatchTable.
    """

    _guard_factories: MappingProxyType[str, GuardFactory] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def load_table(self, config: TableConfig) -> MatchTable:
        """Load a MatchTable from configuration.

        The default value becomes the table's DEFAULT arm, placed last.

        Raises:
            UnknownGuardError: guard name not registered
            InvalidConfigError: guard factory rejected its config
            TooManyArmsError: too many arms
            TooManyGuardsError: too many compound children
            PatternTooLongError: text guard pattern exceeds length limit
            GuardTooDeepError: condition tree exceeds MAX_DEPTH
        """
        # the DEFAULT arm counts towards the limit
        if len(config.arms) + 1 > MAX_ARMS:
            raise TooManyArmsError(len(config.arms) + 1, MAX_ARMS)

        arms = tuple(self._load_arm(arm) for arm in config.arms)
        table = MatchTable((*arms, MatchArm(Default(), config.default)))
        logger.debug("loaded match table with %d arms", len(arms))
        return table

    @property
    def guard_count(self) -> int:
        """Number of registered guards."""
        return len(self._guard_factories)

    def contains_guard(self, name: str) -> bool:
        """Check if a guard name is registered."""
        return name in self._guard_factories

    def guard_names(self) -> list[str]:
        """Return all registered guard names (sorted)."""
        return sorted(self._guard_factories.keys())

    # ── Private loading methods ────────────────────────────────────────────

    def _load_arm(self, config: ArmConfig) -> MatchArm:
        # A top-level literal stays a literal; everything else is a guard.
        if isinstance(config.when, EqualsConfig):
            return MatchArm(Literal(config.when.value), config.then)
        return MatchArm(Guard(self._load_when(config.when, 1)), config.then)

    def _load_when(self, config: WhenConfig, depth: int) -> Callable[[Any], Any]:
        # depth counts the same way as guard_depth: a leaf at the root is 1
        if depth > MAX_DEPTH:
            raise GuardTooDeepError(depth, MAX_DEPTH)
        match config:
            case EqualsConfig(value=value):
                return partial(_guards.is_equal, value)
            case GuardConfig():
                return self._load_guard(config)
            case AllConfig(whens=children):
                return AllOf(self._load_children(children, depth + 1))
            case AnyConfig(whens=children):
                return AnyOf(self._load_children(children, depth + 1))
            case NotConfig(when=inner):
                return Not(self._load_when(inner, depth + 1))
            case _:  # pragma: no cover
                msg = f"unknown when config type: {type(config).__name__}"
                raise InvalidConfigError(msg)

    def _load_children(
        self, children: tuple[WhenConfig, ...], depth: int
    ) -> tuple[Callable[[Any], Any], ...]:
        if len(children) > MAX_GUARDS_PER_COMPOUND:
            raise TooManyGuardsError(len(children), MAX_GUARDS_PER_COMPOUND)
        return tuple(self._load_when(child, depth) for child in children)

    def _load_guard(self, config: GuardConfig) -> Callable[[Any], Any]:
        factory = self._guard_factories.get(config.name)
        if factory is None:
            raise UnknownGuardError(config.name, list(self._guard_factories.keys()))

        try:
            guard = factory(config.config)
        except PatternTooLongError:
            raise
        except Exception as e:
            raise InvalidConfigError(str(e)) from e

        if not callable(guard):
            msg = f"guard {config.name!r} factory returned non-callable {type(guard).__name__}"
            raise InvalidConfigError(msg)
        return guard


# ═══════════════════════════════════════════════════════════════════════════════
# Factory helpers
# ═══════════════════════════════════════════════════════════════════════════════


def _configless(name: str, config: dict[str, Any], fn: Callable[[Any], Any]) -> Any:
    if config:
        msg = f"guard {name!r} takes no config, got keys: {sorted(map(str, config))}"
        raise ValueError(msg)
    return fn


def _text_factory(guard_type: type[TextGuard], key: str) -> GuardFactory:
    def factory(config: dict[str, Any]) -> TextGuard:
        pattern = config.get(key)
        if not isinstance(pattern, str):
            msg = f"requires a {key!r} field (string)"
            raise ValueError(msg)
        return guard_type(pattern, _ignore_case(config))

    return factory


def _ignore_case(config: dict[str, Any]) -> bool:
    value = config.get("ignore_case", False)
    if not isinstance(value, bool):
        msg = f"'ignore_case' must be a bool, got {type(value).__name__}"
        raise ValueError(msg)
    return value
