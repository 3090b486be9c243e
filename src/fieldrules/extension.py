"""Runtime extension of the rule registry and message catalog.

An extension spec is either a bare predicate or a bundle exposing
``validate`` plus ``get_message`` and/or ``messages``. Bundles may be
plain objects (attributes) or mappings (keys).
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from fieldrules.exceptions import ExtensionError
from fieldrules.messages import DEFAULT_MESSAGE, compile_template
from fieldrules.registry import MessageCatalog, RuleRegistry
from fieldrules.types import DEFAULT_LOCALE, Formatter, Predicate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BarePredicate:
    """A plain callable registered with the default English message."""

    predicate: Predicate


@dataclass(frozen=True)
class PredicateBundle:
    """A predicate with its own message sources.

    Attributes:
        validate: The rule predicate
        get_message: English formatter, if provided
        messages: Locale -> formatter, if provided
    """

    validate: Predicate
    get_message: Formatter | None = None
    messages: Mapping[str, Any] = field(default_factory=dict)


def _member(spec: Any, name: str) -> Any:
    if isinstance(spec, Mapping):
        return spec.get(name)
    return getattr(spec, name, None)


def coerce_extension(name: str, spec: Any, rules: RuleRegistry) -> BarePredicate | PredicateBundle:
    """Check an extension spec against the registration contract.

    Raises:
        ExtensionError: On a duplicate name or a malformed spec
    """
    if name in rules:
        raise ExtensionError(
            f"Extension Error: There is an existing validator with the same name '{name}'."
        )

    validate = _member(spec, "validate")
    if not callable(validate):
        if callable(spec):
            return BarePredicate(predicate=spec)
        raise ExtensionError(
            f"Extension Error: The validator '{name}' must be a function or have a 'validate' method."
        )

    get_message = _member(spec, "get_message")
    messages = _member(spec, "messages")
    if not callable(get_message) and not isinstance(messages, Mapping):
        raise ExtensionError(
            f"Extension Error: The validator '{name}' must have a 'get_message' method "
            "or have a 'messages' mapping."
        )

    return PredicateBundle(
        validate=validate,
        get_message=get_message if callable(get_message) else None,
        messages=messages if isinstance(messages, Mapping) else {},
    )


def merge_extension(
    name: str,
    extension: BarePredicate | PredicateBundle,
    rules: RuleRegistry,
    catalog: MessageCatalog,
) -> None:
    """Install a checked extension into the registry and catalog."""
    if isinstance(extension, BarePredicate):
        rules.register(name, extension.predicate)
        catalog.set(DEFAULT_LOCALE, name, compile_template(DEFAULT_MESSAGE))
        return

    rules.register(name, extension.validate)

    if extension.get_message is not None:
        catalog.set(DEFAULT_LOCALE, name, extension.get_message)

    for locale, formatter in extension.messages.items():
        catalog.set(locale, name, formatter)


def extend(name: str, spec: Any, rules: RuleRegistry, catalog: MessageCatalog) -> None:
    """Guard and merge a new rule."""
    extension = coerce_extension(name, spec, rules)
    merge_extension(name, extension, rules, catalog)
    logger.debug("Extended rules with '%s' (%s)", name, type(extension).__name__)
