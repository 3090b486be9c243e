"""fieldrules — declarative per-field validation.

Fields get rule chains written as ``rule|rule:p1,p2``; each chain runs
left to right and failures are recorded as localized messages in the
validator's ErrorBag. Rules may be synchronous or asynchronous, and new
rules and message dictionaries can be registered at runtime.

Usage:
    from fieldrules import Validator

    Validator.extend("even", lambda value, params: int(value) % 2 == 0)

    validator = Validator({"count": "required|even"})
    validator.validate("count", "3")  # False
    validator.get_errors().messages("count")
    # ["The count value is not valid."]
"""

from fieldrules.config import FieldRulesConfig, configure
from fieldrules.dictionary import load_dictionary, parse_dictionary
from fieldrules.error_bag import ErrorBag
from fieldrules.exceptions import DictionaryError, ExtensionError, FieldRulesError
from fieldrules.extension import BarePredicate, PredicateBundle
from fieldrules.messages import compile_template
from fieldrules.parser import normalize, parse_expression
from fieldrules.registry import MessageCatalog, RuleRegistry, default_messages, default_rules
from fieldrules.types import (
    DEFAULT_LOCALE,
    Deferred,
    ErrorEntry,
    Formatter,
    Immediate,
    Predicate,
    RuleSpec,
)
from fieldrules.validator import PendingResult, Validator

__all__ = [
    # Types
    "DEFAULT_LOCALE",
    "Deferred",
    "ErrorEntry",
    "Formatter",
    "Immediate",
    "Predicate",
    "RuleSpec",
    # Engine
    "ErrorBag",
    "PendingResult",
    "Validator",
    "normalize",
    "parse_expression",
    # Registries
    "MessageCatalog",
    "RuleRegistry",
    "default_messages",
    "default_rules",
    # Extension
    "BarePredicate",
    "PredicateBundle",
    "compile_template",
    # Dictionaries & config
    "FieldRulesConfig",
    "configure",
    "load_dictionary",
    "parse_dictionary",
    # Errors
    "DictionaryError",
    "ExtensionError",
    "FieldRulesError",
]
