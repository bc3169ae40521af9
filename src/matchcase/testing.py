"""Test utilities for matchcase.

Provides small callables for tests and examples: a recording evaluation to
observe when (and with what) the dispatcher invokes it, and a dict-key
guard for record-shaped values. These exist to reduce boilerplate; they
are not part of the matching model.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from matchcase._guards import is_equal, is_object

if TYPE_CHECKING:
    from matchcase._registry import RegistryBuilder


@dataclass(slots=True)
class Recorder:
    """Callable that records every argument it is called with.

    Usable as an arm evaluation (returns ``result``) or as a guard (set
    ``result=True``).

    >>> from matchcase import DEFAULT, match
    >>> from matchcase.testing import Recorder
    >>> rec = Recorder(result="hit")
    >>> match(1)([[1, rec], [DEFAULT, "miss"]])
    'hit'
    >>> rec.calls
    [1]
    """

    result: Any = None
    calls: list[Any] = field(default_factory=list)

    def __call__(self, value: Any, /) -> Any:
        self.calls.append(value)
        return self.result

    @property
    def called(self) -> bool:
        return bool(self.calls)


@dataclass(frozen=True, slots=True)
class KeyEquals:
    """Guard: value is a record whose ``key`` entry strictly equals ``expected``.

    A missing key or a non-record value does not match.
    """

    key: str
    expected: Any

    def __call__(self, value: Any, /) -> bool:
        if not is_object(value) or self.key not in value:
            return False
        return is_equal(self.expected, value[self.key])


def register(builder: RegistryBuilder) -> RegistryBuilder:
    """Register the test-domain KeyEquals guard.

    Guard name: matchcase.test.v1.KeyEquals
    Config fields: { "key": "field_name", "value": expected }
    """
    return builder.guard("matchcase.test.v1.KeyEquals", _key_equals_factory)


def _key_equals_factory(config: dict[str, Any]) -> KeyEquals:
    key = config.get("key")
    if not isinstance(key, str):
        msg = "KeyEquals requires a 'key' field (string)"
        raise ValueError(msg)
    if "value" not in config:
        msg = "KeyEquals requires a 'value' field"
        raise ValueError(msg)
    return KeyEquals(key=key, expected=config["value"])
