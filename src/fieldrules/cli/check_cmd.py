"""Validation CLI commands — check and rules."""

import asyncio
from pathlib import Path
from typing import Any

import click
import yaml

from fieldrules.config import FieldRulesConfig, configure
from fieldrules.exceptions import FieldRulesError
from fieldrules.registry import default_rules
from fieldrules.validator import Validator


def _load_mapping(path: Path) -> dict[str, Any]:
    """Load a YAML file that must contain a top-level mapping."""
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise click.ClickException(f"{path}: invalid YAML: {e}")
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise click.ClickException(f"{path}: expected a mapping at the top level")
    return data


async def _validate(validator: Validator, values: dict[str, Any]) -> None:
    """Run validate_all inside a loop so every asynchronous rule is fired, then wait for all."""
    validator.validate_all(values)
    await validator.settle()


@click.command()
@click.argument("rules_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("values_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--locale",
    default=None,
    help="Message locale (defaults to FIELDRULES_LOCALE or 'en').",
)
@click.option(
    "--dictionary",
    "dictionaries",
    multiple=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML message dictionary to load. May be repeated.",
)
def check(rules_file: Path, values_file: Path, locale: str | None, dictionaries: tuple[Path, ...]):
    """Validate VALUES_FILE against the field rules in RULES_FILE."""
    config = FieldRulesConfig.from_env()
    config.dictionary_paths.extend(dictionaries)

    try:
        configure(config)
    except FieldRulesError as e:
        raise click.ClickException(str(e))

    validations = _load_mapping(rules_file)
    for name, expression in validations.items():
        if not isinstance(expression, str):
            raise click.ClickException(
                f"{rules_file}: rules for '{name}' must be a string like 'required|min:3'"
            )
    data = _load_mapping(values_file)

    validator = Validator(validations, locale=locale or config.locale)

    # Fields with rules but no value are validated as None
    values = {name: data.get(name) for name in validator.fields()}
    for extra in sorted(set(data) - set(values)):
        click.echo(click.style(f"No rules for field '{extra}', skipping", fg="yellow"), err=True)

    asyncio.run(_validate(validator, values))

    errors = validator.get_errors().all()
    for entry in errors:
        click.echo(click.style(f"{entry.field}: {entry.message}", fg="red"))

    if errors:
        click.echo(
            click.style(
                f"\n{len(errors)} error(s) in {len(validator.get_errors())} field(s)",
                fg="red",
                bold=True,
            )
        )
        raise SystemExit(1)

    click.echo(click.style(f"All {len(values)} field(s) are valid.", fg="green", bold=True))


@click.command()
def rules():
    """List registered rule names."""
    for name in default_rules.list_registered():
        click.echo(name)
