"""Value predicates: classify a value's runtime kind or shape.

Every predicate here is total: it accepts any value, returns a plain bool,
never raises and has no side effects. That makes each of them usable both
on its own and as the expression of a match arm.

"Missing" means None. Python has no separate undefined marker, so
is_none and is_missing agree; both exist so call sites can say which
question they are asking.
"""

from __future__ import annotations

import inspect
import numbers
from collections.abc import Mapping, Sequence, Set
from typing import Any

# Sequences that are values rather than containers.
_TEXT_TYPES = (str, bytes, bytearray)


def is_none(val: Any) -> bool:
    return val is None


def is_missing(val: Any) -> bool:
    return val is None


def is_present(val: Any) -> bool:
    return not is_missing(val)


def is_boolean(val: Any) -> bool:
    return isinstance(val, bool)


def is_array(val: Any) -> bool:
    """Sequence container: list, tuple, range, ... but not str or bytes."""
    return isinstance(val, Sequence) and not isinstance(val, _TEXT_TYPES)


def is_object(val: Any) -> bool:
    """Record-shaped value: any Mapping."""
    return isinstance(val, Mapping)


def is_string(val: Any) -> bool:
    return isinstance(val, str)


def is_number(val: Any) -> bool:
    """Numeric, not a bool, and not NaN."""
    if isinstance(val, bool) or not isinstance(val, numbers.Number):
        return False
    try:
        return not bool(val != val)  # NaN is the only value unequal to itself
    except Exception:  # noqa: BLE001
        return False


def is_function(val: Any) -> bool:
    return callable(val)


def is_non_empty_string(val: Any) -> bool:
    return is_string(val) and len(val) > 0


def is_non_empty_array(val: Any) -> bool:
    return is_array(val) and len(val) > 0


def is_true(val: Any) -> bool:
    return val is True


def is_positive_integer(val: Any) -> bool:
    return _is_integral(val) and val > 0


def is_non_negative_integer(val: Any) -> bool:
    return _is_integral(val) and val >= 0


def has_one_item(val: Any) -> bool:
    return is_array(val) and len(val) == 1


def has_multiple_items(val: Any) -> bool:
    return is_array(val) and len(val) > 1


def is_constructable(val: Any) -> bool:
    """A class that can be instantiated.

    Decided from the class itself (a concrete ``type``), never by calling
    it: instantiation may have side effects or need arguments.
    """
    return isinstance(val, type) and not inspect.isabstract(val)


def has_only_keys(val: Any, keys: Any) -> bool:
    """val is a record whose key set is exactly the set of keys."""
    if not is_object(val) or not (is_array(keys) or isinstance(keys, Set)):
        return False
    try:
        return set(val.keys()) == set(keys)
    except TypeError:
        # unhashable entries in keys can never be record keys
        return False


def is_equal(a: Any, b: Any) -> bool:
    """Strict equality.

    Identity first. Booleans equal only booleans, numbers compare by value
    (so 1 equals 1.0 and NaN equals nothing), str and bytes compare by
    value within their own type. Everything else is equal only to itself.
    """
    if a is b:
        return True
    if isinstance(a, bool) or isinstance(b, bool):
        return False
    if is_number(a) and is_number(b):
        try:
            return bool(a == b)
        except Exception:  # noqa: BLE001
            return False
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    if isinstance(a, bytes) and isinstance(b, bytes):
        return a == b
    return False


def _is_integral(val: Any) -> bool:
    """Integer-valued real number (3 or 3.0, never True)."""
    if not is_number(val) or not isinstance(val, numbers.Real):
        return False
    if isinstance(val, numbers.Integral):
        return True
    is_integer = getattr(val, "is_integer", None)
    return callable(is_integer) and is_integer() is True
