"""Rule chain parser.

Turns ``"required|min:3|between:1,10"`` into an ordered list of RuleSpec.
"""

from collections.abc import Mapping

from fieldrules.types import RuleSpec


def parse_rule(rule: str) -> RuleSpec:
    """Parse a single ``name`` or ``name:p1,p2`` rule.

    Only the first ':' separates the name from its params; the params are
    split on ',' and kept as raw strings.
    """
    name, sep, raw_params = rule.partition(":")
    if not sep:
        return RuleSpec(name=name, params=None)
    return RuleSpec(name=name, params=tuple(raw_params.split(",")))


def parse_expression(expression: str) -> list[RuleSpec]:
    """Parse a ``rule|rule|...`` expression into its chain, in declared order."""
    return [parse_rule(rule) for rule in expression.split("|")]


def normalize(validations: Mapping[str, str] | None) -> dict[str, list[RuleSpec]]:
    """Normalize a field -> expression mapping into field -> chain."""
    if not validations:
        return {}

    normalized: dict[str, list[RuleSpec]] = {}
    for field_name, expression in validations.items():
        normalized.setdefault(field_name, []).extend(parse_expression(expression))
    return normalized
