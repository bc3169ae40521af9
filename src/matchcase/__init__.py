"""matchcase: value predicates and first-match-wins dispatch.

All public names are exported from this module for flat imports:

    from matchcase import DEFAULT, match, is_positive_integer

    match(3)([[is_positive_integer, lambda v: f"positive:{v}"], [DEFAULT, "n/a"]])
"""

import logging

__version__ = "0.1.0"

# Match arms
from matchcase._arms import (
    DEFAULT,
    Default,
    Guard,
    Literal,
    MatchArm,
    normalize_advanced,
    normalize_basic,
    tag_expression,
)

# Guard composition
from matchcase._combinators import AllOf, AnyOf, Not, all_of, always, any_of, guard_depth

# Config types: see matchcase._config for details
from matchcase._config import (
    AllConfig,
    AnyConfig,
    ArmConfig,
    ConfigParseError,
    EqualsConfig,
    GuardConfig,
    NotConfig,
    TableConfig,
    WhenConfig,
    parse_table_config,
)

# Errors and fail-fast helpers
from matchcase._errors import (
    EmptyMatcherError,
    GuardError,
    MatchError,
    MatcherTypeError,
    MissingDefaultError,
    MissingValueError,
    PatternTooLongError,
    TooManyArmsError,
    raise_if_empty,
    raise_if_missing,
)

# Predicates
from matchcase._guards import (
    has_multiple_items,
    has_one_item,
    has_only_keys,
    is_array,
    is_boolean,
    is_constructable,
    is_equal,
    is_function,
    is_missing,
    is_non_empty_array,
    is_non_empty_string,
    is_non_negative_integer,
    is_none,
    is_number,
    is_object,
    is_positive_integer,
    is_present,
    is_string,
    is_true,
)

# Container kinds
from matchcase._kinds import is_date, is_map, is_set, is_weak_map, is_weak_set

# Dispatcher
from matchcase._match import MAX_ARMS, Match, MatchTable, match, normalize

# Registry: see matchcase._registry for details
from matchcase._registry import (
    MAX_DEPTH,
    MAX_GUARDS_PER_COMPOUND,
    GuardTooDeepError,
    InvalidConfigError,
    Registry,
    RegistryBuilder,
    TooManyGuardsError,
    UnknownGuardError,
    register_core_guards,
)

# Text guards
from matchcase._text import (
    MAX_PATTERN_LENGTH,
    MAX_REGEX_PATTERN_LENGTH,
    Contains,
    Exact,
    Prefix,
    Regex,
    Suffix,
    TextGuard,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Predicates
    "is_none",
    "is_missing",
    "is_present",
    "is_boolean",
    "is_array",
    "is_object",
    "is_string",
    "is_number",
    "is_function",
    "is_non_empty_string",
    "is_non_empty_array",
    "is_true",
    "is_positive_integer",
    "is_non_negative_integer",
    "has_one_item",
    "has_multiple_items",
    "is_constructable",
    "has_only_keys",
    "is_equal",
    # Container kinds
    "is_map",
    "is_set",
    "is_weak_map",
    "is_weak_set",
    "is_date",
    # Arms
    "DEFAULT",
    "Default",
    "Guard",
    "Literal",
    "MatchArm",
    "tag_expression",
    "normalize_basic",
    "normalize_advanced",
    # Dispatcher
    "match",
    "Match",
    "MatchTable",
    "normalize",
    "MAX_ARMS",
    # Errors
    "MatchError",
    "MatcherTypeError",
    "EmptyMatcherError",
    "MissingDefaultError",
    "MissingValueError",
    "TooManyArmsError",
    "GuardError",
    "raise_if_empty",
    "raise_if_missing",
    # Text guards
    "Exact",
    "Prefix",
    "Suffix",
    "Contains",
    "Regex",
    "TextGuard",
    # Guard composition
    "AllOf",
    "AnyOf",
    "Not",
    "all_of",
    "any_of",
    "always",
    "guard_depth",
    # Config types
    "EqualsConfig",
    "GuardConfig",
    "AllConfig",
    "AnyConfig",
    "NotConfig",
    "WhenConfig",
    "ArmConfig",
    "TableConfig",
    "ConfigParseError",
    "parse_table_config",
    # Registry
    "RegistryBuilder",
    "Registry",
    "register_core_guards",
    "UnknownGuardError",
    "InvalidConfigError",
    "TooManyGuardsError",
    "PatternTooLongError",
    "GuardTooDeepError",
    "MAX_DEPTH",
    "MAX_GUARDS_PER_COMPOUND",
    "MAX_PATTERN_LENGTH",
    "MAX_REGEX_PATTERN_LENGTH",
]
