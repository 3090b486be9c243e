"""Built-in English message templates.

Templates use ``str.format`` placeholders: ``{field}`` for the field name
and ``{0}``, ``{1}``, ... for the rule params.
"""

from collections.abc import Sequence

from fieldrules.types import Formatter

DEFAULT_MESSAGE = "The {field} value is not valid."


def compile_template(template: str) -> Formatter:
    """Build a formatter from a ``str.format`` template."""

    def formatter(field: str, params: Sequence[str] | None = None) -> str:
        return template.format(*(params or ()), field=field)

    return formatter


EN_TEMPLATES: dict[str, str] = {
    "required": "The {field} field is required.",
    "email": "The {field} field must be a valid email.",
    "url": "The {field} field is not a valid URL.",
    "ip": "The {field} field must be a valid ip address.",
    "alpha": "The {field} field may only contain alphabetic characters.",
    "alpha_num": "The {field} field may only contain alpha-numeric characters.",
    "alpha_dash": "The {field} field may contain alpha-numeric characters as well as dashes and underscores.",
    "alpha_spaces": "The {field} field may only contain alphabetic characters as well as spaces.",
    "numeric": "The {field} field may only contain numeric characters.",
    "decimal": "The {field} field must be numeric and may contain decimal points.",
    "digits": "The {field} field must be numeric and exactly contain {0} digits.",
    "min": "The {field} field must be at least {0} characters.",
    "max": "The {field} field may not be greater than {0} characters.",
    "min_value": "The {field} field must be {0} or more.",
    "max_value": "The {field} field must be {0} or less.",
    "between": "The {field} field must be between {0} and {1}.",
    "in": "The {field} field must be a valid value.",
    "not_in": "The {field} field must be a valid value.",
    "regex": "The {field} field format is invalid.",
    "confirmed": "The {field} confirmation does not match.",
}

BUILTIN_MESSAGES: dict[str, dict[str, Formatter]] = {
    "en": {name: compile_template(template) for name, template in EN_TEMPLATES.items()},
}
