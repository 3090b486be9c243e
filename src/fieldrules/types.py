"""Core types for the fieldrules validation engine.

This module defines the data shapes shared by every component:
- RuleSpec: one parsed rule of a chain (name + raw params)
- ErrorEntry: one recorded failure for a field
- Immediate / Deferred: tagged outcome of a single predicate call
"""

import inspect
from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

DEFAULT_LOCALE = "en"

# Predicate signature: (value, params) -> bool | awaitable of sub-check results
Predicate = Callable[[Any, Sequence[str] | None], Any]

# Formatter signature: (field, params) -> message
Formatter = Callable[[str, Sequence[str] | None], str]


@dataclass(frozen=True)
class RuleSpec:
    """A single rule in a field's chain.

    Attributes:
        name: Registered rule name (e.g., "required", "min")
        params: Raw string params after the first ':' or None if absent
    """

    name: str
    params: tuple[str, ...] | None = None


@dataclass(frozen=True)
class ErrorEntry:
    """A single recorded validation failure.

    Attributes:
        field: Field name the failure belongs to
        message: Formatted, localized message
    """

    field: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True)
class Immediate:
    """A predicate result available right away."""

    passed: bool


@dataclass(frozen=True)
class Deferred:
    """A predicate result that resolves later to a list of sub-check results."""

    pending: Awaitable[Any]


def classify(result: Any) -> Immediate | Deferred:
    """Tag a raw predicate result as immediate or deferred.

    Any awaitable is deferred; everything else is judged by truthiness.
    """
    if inspect.isawaitable(result):
        return Deferred(pending=result)
    return Immediate(passed=bool(result))


def is_valid(check: Any) -> bool:
    """Read the ``valid`` flag of a sub-check result (attribute or mapping key).

    A missing flag reads as False.
    """
    if isinstance(check, Mapping):
        return bool(check.get("valid", False))
    return bool(getattr(check, "valid", False))
