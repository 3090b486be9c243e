"""Rule registry and message catalog.

Provides registration and lookup for:
- Rule predicates, by rule name
- Message formatters, by locale and rule name

A default registry and catalog are built once at import time, seeded
with the built-ins, and shared by every Validator that is not given
its own.
"""

import logging
from collections.abc import Mapping
from typing import Any

from fieldrules.messages import BUILTIN_MESSAGES
from fieldrules.rules import BUILTIN_RULES
from fieldrules.types import DEFAULT_LOCALE, Formatter, Predicate

logger = logging.getLogger(__name__)


class RuleRegistry:
    """Registry of rule predicates.

    Entries are only ever added. Duplicate names are rejected by the
    extension guard, not here.

    Example:
        rules = RuleRegistry.with_builtins()
        rules.get("required")("hello", None)  # True
    """

    def __init__(self, rules: Mapping[str, Predicate] | None = None):
        self._rules: dict[str, Predicate] = dict(rules or {})

    @classmethod
    def with_builtins(cls) -> "RuleRegistry":
        """Create a registry seeded with the built-in rules."""
        return cls(BUILTIN_RULES)

    def register(self, name: str, predicate: Predicate) -> None:
        """Register a predicate under a rule name.

        Overwrites any existing entry; duplicate names are rejected earlier
        by Validator.extend().

        Args:
            name: Rule name as used in expressions (e.g., "even")
            predicate: Callable taking (value, params) and returning a bool
                or an awaitable of sub-check results
        """
        self._rules[name] = predicate
        logger.debug("Registered rule '%s'", name)

    def get(self, name: str) -> Predicate:
        """Get a predicate by rule name.

        Args:
            name: The rule name

        Returns:
            The registered predicate

        Raises:
            ValueError: If the rule is not registered
        """
        if name not in self._rules:
            raise ValueError(
                f"Rule '{name}' is not registered. "
                "Custom rules must be added with Validator.extend() before use."
            )
        return self._rules[name]

    def is_registered(self, name: str) -> bool:
        """Check if a rule is registered."""
        return name in self._rules

    def list_registered(self) -> list[str]:
        """List all registered rule names."""
        return sorted(self._rules)

    def __contains__(self, name: object) -> bool:
        return name in self._rules


class MessageCatalog:
    """Locale-keyed catalog of message formatters.

    Values are stored as given; a non-callable entry is treated as missing
    when a message is resolved.
    """

    def __init__(self, messages: Mapping[str, Mapping[str, Any]] | None = None):
        self._messages: dict[str, dict[str, Any]] = {}
        if messages:
            self.update(messages)

    @classmethod
    def with_builtins(cls) -> "MessageCatalog":
        """Create a catalog seeded with the built-in English messages."""
        return cls(BUILTIN_MESSAGES)

    def get(self, locale: str, name: str) -> Any:
        """Get the raw entry for a rule in a locale, or None."""
        return self._messages.get(locale, {}).get(name)

    def set(self, locale: str, name: str, formatter: Any) -> None:
        """Add or overwrite one entry, creating the locale if needed."""
        self._messages.setdefault(locale, {})[name] = formatter

    def update(self, messages_by_locale: Mapping[str, Mapping[str, Any]]) -> None:
        """Merge locale -> (rule -> formatter) entries.

        Missing locales are created; entries not mentioned are left untouched.

        Args:
            messages_by_locale: Locale -> rule name -> formatter. Values are
                stored as given, callable or not
        """
        for locale, messages in messages_by_locale.items():
            bucket = self._messages.setdefault(locale, {})
            for name, formatter in messages.items():
                bucket[name] = formatter
            logger.debug("Updated %d message(s) for locale '%s'", len(messages), locale)

    def resolve(self, locale: str, name: str) -> Formatter:
        """Resolve the formatter for a rule, falling back to English.

        Args:
            locale: The preferred locale
            name: The rule name

        Returns:
            The locale's formatter if callable, else the English one

        Raises:
            ValueError: If neither the locale nor English has a callable formatter
        """
        formatter = self.get(locale, name)
        if callable(formatter):
            return formatter

        fallback = self.get(DEFAULT_LOCALE, name)
        if callable(fallback):
            return fallback

        raise ValueError(
            f"No message formatter for rule '{name}' "
            f"in locale '{locale}' or '{DEFAULT_LOCALE}'."
        )

    def locales(self) -> list[str]:
        """List all locales present in the catalog."""
        return sorted(self._messages)


default_rules = RuleRegistry.with_builtins()
default_messages = MessageCatalog.with_builtins()
