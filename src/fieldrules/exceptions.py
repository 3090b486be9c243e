"""Exceptions raised by fieldrules.

Validation failures are never exceptions; they are recorded in the
ErrorBag. These classes cover setup mistakes only.
"""


class FieldRulesError(Exception):
    """Base class for fieldrules setup errors."""
    pass


class ExtensionError(FieldRulesError):
    """A rule extension violates the registration contract."""
    pass


class DictionaryError(FieldRulesError):
    """A message dictionary file could not be read or is malformed."""
    pass
