"""Built-in rule predicates.

Every predicate takes ``(value, params)`` where ``params`` is the tuple of
raw strings from the rule expression (or None). Predicates coerce their
own params. Apart from ``required``, an empty value passes: combine with
``required`` to make a field mandatory.
"""

import ipaddress
import re
from collections.abc import Sequence
from decimal import Decimal, InvalidOperation
from typing import Any

from fieldrules.types import Predicate


# =============================================================================
# Patterns
# =============================================================================

EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
)

URL_PATTERN = re.compile(
    r"^https?://[^\s/$.?#].[^\s]*$",
    re.IGNORECASE
)

ALPHA_PATTERN = re.compile(r"^[^\W\d_]*$")
ALPHA_NUM_PATTERN = re.compile(r"^[^\W_]*$")
ALPHA_DASH_PATTERN = re.compile(r"^[\w-]*$")
ALPHA_SPACES_PATTERN = re.compile(r"^[^\W\d_\s]*(?:\s+[^\W\d_\s]*)*$")
NUMERIC_PATTERN = re.compile(r"^[0-9]*$")


# =============================================================================
# Helpers
# =============================================================================


def _is_empty(value: Any) -> bool:
    """Check if a value is considered empty."""
    if value is None:
        return True
    if isinstance(value, str) and value.strip() == "":
        return True
    if isinstance(value, (list, tuple, dict, set)) and len(value) == 0:
        return True
    return False


def _to_decimal(value: Any) -> Decimal | None:
    """Parse a number from a value, returning None when it isn't one."""
    if isinstance(value, bool):
        return None
    try:
        return Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None


def _param(params: Sequence[str] | None, index: int) -> str:
    if not params or len(params) <= index:
        raise ValueError(f"Rule requires at least {index + 1} parameter(s)")
    return params[index]


def _length(value: Any) -> int:
    if isinstance(value, (str, list, tuple, dict, set)):
        return len(value)
    return len(str(value))


# =============================================================================
# Predicates
# =============================================================================


def required(value: Any, params: Sequence[str] | None = None) -> bool:
    return not _is_empty(value)


def email(value: Any, params: Sequence[str] | None = None) -> bool:
    if _is_empty(value):
        return True
    return isinstance(value, str) and EMAIL_PATTERN.match(value) is not None


def url(value: Any, params: Sequence[str] | None = None) -> bool:
    if _is_empty(value):
        return True
    return isinstance(value, str) and URL_PATTERN.match(value) is not None


def ip(value: Any, params: Sequence[str] | None = None) -> bool:
    """Validate an IP address; ``ip:4`` / ``ip:6`` restrict the version."""
    if _is_empty(value):
        return True
    try:
        address = ipaddress.ip_address(str(value))
    except ValueError:
        return False
    if params and params[0]:
        return str(address.version) == params[0]
    return True


def alpha(value: Any, params: Sequence[str] | None = None) -> bool:
    if _is_empty(value):
        return True
    return ALPHA_PATTERN.match(str(value)) is not None


def alpha_num(value: Any, params: Sequence[str] | None = None) -> bool:
    if _is_empty(value):
        return True
    return ALPHA_NUM_PATTERN.match(str(value)) is not None


def alpha_dash(value: Any, params: Sequence[str] | None = None) -> bool:
    if _is_empty(value):
        return True
    return ALPHA_DASH_PATTERN.match(str(value)) is not None


def alpha_spaces(value: Any, params: Sequence[str] | None = None) -> bool:
    if _is_empty(value):
        return True
    return ALPHA_SPACES_PATTERN.match(str(value)) is not None


def numeric(value: Any, params: Sequence[str] | None = None) -> bool:
    if _is_empty(value):
        return True
    return NUMERIC_PATTERN.match(str(value)) is not None


def decimal(value: Any, params: Sequence[str] | None = None) -> bool:
    """Validate a decimal number; ``decimal:2`` caps the fraction digits."""
    if _is_empty(value):
        return True
    number = _to_decimal(value)
    if number is None or not number.is_finite():
        return False
    if params and params[0]:
        exponent = number.as_tuple().exponent
        places = -exponent if isinstance(exponent, int) and exponent < 0 else 0
        return places <= int(params[0])
    return True


def digits(value: Any, params: Sequence[str] | None = None) -> bool:
    """Validate a numeric string of exactly N digits (``digits:N``)."""
    if _is_empty(value):
        return True
    text = str(value)
    return NUMERIC_PATTERN.match(text) is not None and len(text) == int(_param(params, 0))


def min_length(value: Any, params: Sequence[str] | None = None) -> bool:
    if _is_empty(value):
        return True
    return _length(value) >= int(_param(params, 0))


def max_length(value: Any, params: Sequence[str] | None = None) -> bool:
    if _is_empty(value):
        return True
    return _length(value) <= int(_param(params, 0))


def min_value(value: Any, params: Sequence[str] | None = None) -> bool:
    if _is_empty(value):
        return True
    number = _to_decimal(value)
    return number is not None and number >= Decimal(_param(params, 0))


def max_value(value: Any, params: Sequence[str] | None = None) -> bool:
    if _is_empty(value):
        return True
    number = _to_decimal(value)
    return number is not None and number <= Decimal(_param(params, 0))


def between(value: Any, params: Sequence[str] | None = None) -> bool:
    if _is_empty(value):
        return True
    number = _to_decimal(value)
    if number is None:
        return False
    return Decimal(_param(params, 0)) <= number <= Decimal(_param(params, 1))


def in_list(value: Any, params: Sequence[str] | None = None) -> bool:
    if _is_empty(value):
        return True
    return str(value) in (params or ())


def not_in_list(value: Any, params: Sequence[str] | None = None) -> bool:
    if _is_empty(value):
        return True
    return str(value) not in (params or ())


def regex(value: Any, params: Sequence[str] | None = None) -> bool:
    """Match against a pattern; commas in the pattern are rejoined."""
    if _is_empty(value):
        return True
    pattern = ",".join(params or ())
    return re.search(pattern, str(value)) is not None


def confirmed(value: Any, params: Sequence[str] | None = None) -> bool:
    """Compare against the first param (the confirmation value)."""
    return str(value) == _param(params, 0)


BUILTIN_RULES: dict[str, Predicate] = {
    "required": required,
    "email": email,
    "url": url,
    "ip": ip,
    "alpha": alpha,
    "alpha_num": alpha_num,
    "alpha_dash": alpha_dash,
    "alpha_spaces": alpha_spaces,
    "numeric": numeric,
    "decimal": decimal,
    "digits": digits,
    "min": min_length,
    "max": max_length,
    "min_value": min_value,
    "max_value": max_value,
    "between": between,
    "in": in_list,
    "not_in": not_in_list,
    "regex": regex,
    "confirmed": confirmed,
}
