"""The Validator orchestrator.

Holds a field -> chain mapping and an ErrorBag, runs chains against the
rule registry, and records localized messages on failure.

Usage:
    validator = Validator({"name": "required|alpha", "age": "between:18,99"})
    validator.validate_all({"name": "Ada", "age": 12})
    validator.get_errors().to_dict()
    # {"age": ["The age field must be between 18 and 99."]}

Asynchronous rules make ``validate`` / ``validate_all`` return an
awaitable instead of a bool. Neither method awaits: the value returned is
the result of the last rule (or field) evaluated, pending or not. Inside a
running loop every asynchronous rule starts as a task; without one it is
queued as a PendingResult. ``await validator.settle()`` waits for all of
them either way.
"""

import asyncio
import functools
import logging
from collections import deque
from collections.abc import Awaitable, Coroutine, Mapping
from typing import Any

from fieldrules import extension
from fieldrules.error_bag import ErrorBag
from fieldrules.parser import normalize, parse_expression
from fieldrules.registry import MessageCatalog, RuleRegistry, default_messages, default_rules
from fieldrules.types import DEFAULT_LOCALE, Deferred, RuleSpec, classify, is_valid

logger = logging.getLogger(__name__)


class hybridmethod:
    """Method bound to the instance when called on one, else to the class."""

    def __init__(self, func):
        self.func = func
        functools.update_wrapper(self, func)

    def __get__(self, obj, objtype=None):
        return functools.partial(self.func, objtype if obj is None else obj)


class Validator:
    """Validates field values against declared rule chains.

    Example:
        validator = Validator({"email": "required|email"})
        validator.set_locale("fr")
        if not validator.validate("email", "nope"):
            print(validator.get_errors().messages("email"))

    Validators share the default rule registry and message catalog unless
    given their own via ``rules`` / ``messages``.
    """

    rules: RuleRegistry = default_rules
    messages: MessageCatalog = default_messages

    def __init__(
        self,
        validations: Mapping[str, str] | None = None,
        *,
        locale: str = DEFAULT_LOCALE,
        rules: RuleRegistry | None = None,
        messages: MessageCatalog | None = None,
    ):
        if rules is not None:
            self.rules = rules
        if messages is not None:
            self.messages = messages
        self.locale = locale
        self.validations = normalize(validations)
        self.error_bag = ErrorBag()
        self._pending: set[asyncio.Task[bool]] = set()
        self._queued: deque[PendingResult] = deque()

    @staticmethod
    def create(validations: Mapping[str, str] | None = None) -> "Validator":
        """Static constructor."""
        return Validator(validations)

    # =========================================================================
    # Configuration
    # =========================================================================

    def set_locale(self, locale: str) -> None:
        """Set the locale used for new error messages."""
        self.locale = locale

    def attach(self, field: str, expression: str) -> None:
        """Register (or replace) a field's rule chain and drop its errors."""
        self.validations[field] = []
        self.error_bag.remove(field)
        self.validations[field].extend(parse_expression(expression))

    def detach(self, field: str) -> None:
        """Stop validating a field. Its recorded errors are kept."""
        self.validations.pop(field, None)

    def fields(self) -> list[str]:
        """Names of the attached fields."""
        return list(self.validations)

    @hybridmethod
    def extend(owner, name: str, spec: Any) -> None:
        """Add a custom rule.

        Args:
            name: The new rule name (must not be registered yet)
            spec: A predicate ``(value, params) -> bool | awaitable`` or an
                object/mapping with ``validate`` and ``get_message`` and/or
                ``messages``

        Raises:
            ExtensionError: If the name is taken or the spec is malformed
        """
        extension.extend(name, spec, owner.rules, owner.messages)

    @hybridmethod
    def update_dictionary(owner, messages_by_locale: Mapping[str, Mapping[str, Any]]) -> None:
        """Add or overwrite message formatters, per locale."""
        owner.messages.update(messages_by_locale)

    # =========================================================================
    # Validation
    # =========================================================================

    def validate_all(self, values: Mapping[str, Any]) -> bool | Awaitable[bool]:
        """Validate each value against its field's chain.

        Clears every recorded error first. Fields are validated in the
        mapping's order.

        Args:
            values: Field name -> value to validate

        Returns:
            The result of the last field validated (a bool or an awaitable
            resolving to one), not a conjunction over all fields

        Raises:
            KeyError: If a value has no chain attached
        """
        result: bool | Awaitable[bool] = True
        self.error_bag.clear()
        for field, value in values.items():
            result = self.validate(field, value)
        return result

    def validate(self, field: str, value: Any) -> bool | Awaitable[bool]:
        """Validate a value against a field's chain.

        Clears the field's errors first, then runs the chain left to right.

        Args:
            field: The field name
            value: The value to validate

        Returns:
            The result of the last rule in the chain (a bool or an awaitable
            resolving to one), not a conjunction over the chain

        Raises:
            KeyError: If no chain is attached for the field
        """
        result: bool | Awaitable[bool] = True
        self.error_bag.remove(field)
        for rule in self.validations[field]:
            result = self.test(field, value, rule)
        return result

    def test(self, field: str, value: Any, rule: RuleSpec) -> bool | Awaitable[bool]:
        """Run a single rule against a value, recording an error on failure.

        Args:
            field: The field name (used for the error message)
            value: The value to validate
            rule: The parsed rule to run

        Returns:
            The rule's result, or an awaitable resolving to the conjunction
            of its sub-check ``valid`` flags for asynchronous rules

        Raises:
            ValueError: If the rule is not registered, or it fails and has
                no message formatter
        """
        predicate = self.rules.get(rule.name)
        outcome = classify(predicate(value, rule.params))

        if isinstance(outcome, Deferred):
            return self._defer(field, rule, outcome)

        if not outcome.passed:
            self.error_bag.add(field, self.format_error_message(field, rule))
        return outcome.passed

    async def settle(self) -> None:
        """Wait until every asynchronous rule fired so far has resolved.

        Covers both tasks started inside a running loop and rules queued
        while no loop was running.
        """
        await self._drain()
        while True:
            pending = [task for task in self._pending if not task.done()]
            if not pending:
                break
            await asyncio.gather(*pending)

    def format_error_message(self, field: str, rule: RuleSpec) -> str:
        """Format the message for a failed rule, falling back to English."""
        formatter = self.messages.resolve(self.locale, rule.name)
        return formatter(field, rule.params)

    def get_errors(self) -> ErrorBag:
        """Get the internal ErrorBag."""
        return self.error_bag

    @property
    def errors(self) -> ErrorBag:
        return self.error_bag

    def _defer(self, field: str, rule: RuleSpec, outcome: Deferred) -> Awaitable[bool]:
        """Reduce a deferred result.

        Inside a running loop the reduction starts at once as a task. Without
        one it is queued as a PendingResult; awaiting it (or ``settle``) runs
        every queued reduction in order.
        """
        settle = self._settle(field, rule, outcome)
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running loop; queued rule '%s' on '%s'", rule.name, field)
            pending = PendingResult(self, settle)
            self._queued.append(pending)
            return pending

        task = loop.create_task(settle)
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _drain(self, target: "PendingResult | None" = None) -> bool:
        """Run queued reductions in order and return the target's result."""
        while self._queued:
            entry = self._queued.popleft()
            entry.result = await entry.settle
        return True if target is None else bool(target.result)

    async def _settle(self, field: str, rule: RuleSpec, outcome: Deferred) -> bool:
        checks = await outcome.pending
        passed = all(is_valid(check) for check in checks)

        if not passed:
            self.error_bag.add(field, self.format_error_message(field, rule))
        return passed


class PendingResult:
    """A deferred rule result queued while no event loop was running.

    Awaiting it, or awaiting ``Validator.settle()``, runs every queued
    reduction of its validator in order. ``result`` holds the outcome once
    it has run.

    Example:
        pending = validator.validate("username", "ada")
        asyncio.run(validator.settle())
        pending.result  # False
    """

    def __init__(self, validator: Validator, settle: Coroutine[Any, Any, bool]):
        self._validator = validator
        self.settle = settle
        self.result: bool | None = None

    def __await__(self):
        return self._validator._drain(self).__await__()
