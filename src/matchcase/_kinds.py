"""Container-kind predicates.

A second classification vocabulary next to matchcase._guards: instead of
general shape, these ask which built-in container a value is. The kinds do
not overlap: weak containers are weak maps and weak sets, never plain maps
or sets.
"""

from __future__ import annotations

import datetime
import weakref
from collections.abc import Mapping, Set
from typing import Any

_WEAK_MAPS = (weakref.WeakKeyDictionary, weakref.WeakValueDictionary)


def is_map(val: Any) -> bool:
    return isinstance(val, Mapping) and not isinstance(val, _WEAK_MAPS)


def is_set(val: Any) -> bool:
    return isinstance(val, Set) and not isinstance(val, weakref.WeakSet)


def is_weak_map(val: Any) -> bool:
    return isinstance(val, _WEAK_MAPS)


def is_weak_set(val: Any) -> bool:
    return isinstance(val, weakref.WeakSet)


def is_date(val: Any) -> bool:
    """date or datetime (datetime subclasses date)."""
    return isinstance(val, datetime.date)
