"""Config types for declarative match tables.

A match table can be written as plain data (JSON, YAML, a dict literal)
and loaded through a Registry. Config-driven construction path:
  dict → parse_table_config() → TableConfig → Registry.load_table() → MatchTable

Example shape::

    arms:
      - when: {equals: 5}
        then: five
      - when: {guard: is_positive_integer}
        then: positive
      - when: {guard: prefix, config: {prefix: "/api"}}
        then: api
      - when: {all: [{guard: is_number}, {not: {equals: 0}}]}
        then: nonzero
    default: other

Relationship to runtime types:

| Config type  | Runtime type            |
|--------------|-------------------------|
| TableConfig  | MatchTable              |
| ArmConfig    | MatchArm                |
| EqualsConfig | Literal expression      |
| GuardConfig  | Guard (via factory)     |
| AllConfig    | AllOf                   |
| AnyConfig    | AnyOf                   |
| NotConfig    | Not                     |
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypeAlias

from matchcase._errors import MatchError

# ═══════════════════════════════════════════════════════════════════════════════
# Config types (frozen dataclasses)
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class EqualsConfig:
    """Match by strict equality with a literal."""

    value: Any


@dataclass(frozen=True, slots=True)
class GuardConfig:
    """Reference to a registered guard with its configuration.

    - name identifies the registered guard factory
    - config carries the guard-specific configuration payload
    """

    name: str
    config: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class AllConfig:
    """All child conditions must hold."""

    whens: tuple[WhenConfig, ...]


@dataclass(frozen=True, slots=True)
class AnyConfig:
    """Any child condition must hold."""

    whens: tuple[WhenConfig, ...]


@dataclass(frozen=True, slots=True)
class NotConfig:
    """Inverts the inner condition."""

    when: WhenConfig


WhenConfig: TypeAlias = EqualsConfig | GuardConfig | AllConfig | AnyConfig | NotConfig


@dataclass(frozen=True, slots=True)
class ArmConfig:
    """Pairs a condition with the value produced when it holds."""

    when: WhenConfig
    then: Any


@dataclass(frozen=True, slots=True)
class TableConfig:
    """Configuration for a MatchTable.

    Arms keep their config order. The default value is required.
    """

    arms: tuple[ArmConfig, ...]
    default: Any


# ═══════════════════════════════════════════════════════════════════════════════
# Parsing (dict → config types)
# ═══════════════════════════════════════════════════════════════════════════════

# Keys that select a `when` form; exactly one must be present.
_WHEN_FORMS = frozenset({"equals", "guard", "all", "any", "not"})

# Parser nesting ceiling. The registry enforces the tighter MAX_DEPTH when
# loading; this only keeps parsing away from the interpreter recursion limit.
MAX_CONFIG_NESTING = 256


class ConfigParseError(MatchError, ValueError):
    """Error parsing a config dict into config types."""


def parse_table_config(data: dict[str, Any]) -> TableConfig:
    """Parse a dict into a TableConfig.

    This is the main entry point for config loading.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"expected dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    raw_arms = data.get("arms")
    if raw_arms is None:
        msg = "missing required field 'arms'"
        raise ConfigParseError(msg)
    if not isinstance(raw_arms, list):
        msg = f"'arms' must be a list, got {type(raw_arms).__name__}"
        raise ConfigParseError(msg)

    if "default" not in data:
        msg = "missing required field 'default'"
        raise ConfigParseError(msg)

    arms = tuple(_parse_arm(arm) for arm in raw_arms)
    return TableConfig(arms=arms, default=data["default"])


def _parse_arm(data: dict[str, Any]) -> ArmConfig:
    if not isinstance(data, dict):
        msg = f"arm must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    if "when" not in data:
        msg = "arm missing required field 'when'"
        raise ConfigParseError(msg)
    if "then" not in data:
        msg = "arm missing required field 'then'"
        raise ConfigParseError(msg)

    return ArmConfig(when=_parse_when(data["when"], 1), then=data["then"])


def _parse_when(data: dict[str, Any], depth: int) -> WhenConfig:
    """Parse a condition dict.

    The form is chosen by which key is present: equals, guard, all, any, not.
    """
    if depth > MAX_CONFIG_NESTING:
        msg = f"when nesting exceeds {MAX_CONFIG_NESTING} levels"
        raise ConfigParseError(msg)
    if not isinstance(data, dict):
        msg = f"when must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    forms = _WHEN_FORMS.intersection(data)
    if len(forms) != 1:
        expected = sorted(_WHEN_FORMS)
        msg = f"when must contain exactly one of {expected}, got keys: {sorted(map(str, data))}"
        raise ConfigParseError(msg)

    (form,) = forms
    if form == "equals":
        return EqualsConfig(value=data["equals"])
    if form == "guard":
        return _parse_guard(data)
    if form == "not":
        return NotConfig(when=_parse_when(data["not"], depth + 1))

    children = data[form]
    if not isinstance(children, list):
        msg = f"'{form}' must be a list, got {type(children).__name__}"
        raise ConfigParseError(msg)
    whens = tuple(_parse_when(child, depth + 1) for child in children)
    return AllConfig(whens=whens) if form == "all" else AnyConfig(whens=whens)


def _parse_guard(data: dict[str, Any]) -> GuardConfig:
    name = data["guard"]
    if not isinstance(name, str):
        msg = f"guard must be a string, got {type(name).__name__}"
        raise ConfigParseError(msg)

    config = data.get("config", {})
    if not isinstance(config, dict):
        msg = f"config must be a dict, got {type(config).__name__}"
        raise ConfigParseError(msg)

    return GuardConfig(name=name, config=config)
