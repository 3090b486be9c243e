"""Per-validator error storage."""

from collections.abc import Iterator, Mapping
from typing import Any

from fieldrules.types import ErrorEntry


class ErrorBag(Mapping[str, list[ErrorEntry]]):
    """Field name -> ordered list of ErrorEntry.

    Read access is through the Mapping interface; only the owning
    Validator writes to it.
    """

    def __init__(self) -> None:
        self._errors: dict[str, list[ErrorEntry]] = {}

    def add(self, field: str, message: str) -> None:
        """Append an error for a field."""
        self._errors.setdefault(field, []).append(ErrorEntry(field=field, message=message))

    def remove(self, field: str) -> None:
        """Remove all errors of a field."""
        self._errors.pop(field, None)

    def clear(self) -> None:
        """Remove all errors of all fields."""
        self._errors.clear()

    def all(self) -> list[ErrorEntry]:
        """All entries, grouped by field in insertion order."""
        return [entry for entries in self._errors.values() for entry in entries]

    def messages(self, field: str) -> list[str]:
        """Message strings recorded for a field."""
        return [entry.message for entry in self._errors.get(field, [])]

    def to_dict(self) -> dict[str, Any]:
        return {field: [e.message for e in entries] for field, entries in self._errors.items()}

    def __getitem__(self, field: str) -> list[ErrorEntry]:
        return list(self._errors[field])

    def __iter__(self) -> Iterator[str]:
        return iter(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __repr__(self) -> str:
        return f"ErrorBag({self.to_dict()!r})"
