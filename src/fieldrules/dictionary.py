"""YAML message dictionaries.

A dictionary file maps locale -> rule name -> template:

    fr:
      required: "Le champ {field} est obligatoire."
      between: "Le champ {field} doit être compris entre {0} et {1}."

Loaded templates are compiled into formatters, ready for
``Validator.update_dictionary``.
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from fieldrules.exceptions import DictionaryError
from fieldrules.messages import compile_template
from fieldrules.types import Formatter

logger = logging.getLogger(__name__)


def parse_dictionary(data: Any, source: str = "<dictionary>") -> dict[str, dict[str, Formatter]]:
    """Compile a loaded locale -> rule -> template document.

    Raises:
        DictionaryError: If the document does not have that shape
    """
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DictionaryError(f"{source}: expected a mapping of locales, got {type(data).__name__}")

    compiled: dict[str, dict[str, Formatter]] = {}
    for locale, templates in data.items():
        if not isinstance(templates, dict):
            raise DictionaryError(f"{source}: locale '{locale}' must map rule names to templates")

        bucket: dict[str, Formatter] = {}
        for name, template in templates.items():
            if not isinstance(template, str):
                raise DictionaryError(
                    f"{source}: template for '{locale}.{name}' must be a string"
                )
            bucket[str(name)] = compile_template(template)
        compiled[str(locale)] = bucket

    return compiled


def load_dictionary(path: Path | str) -> dict[str, dict[str, Formatter]]:
    """Load and compile a YAML dictionary file.

    Raises:
        DictionaryError: If the file cannot be read, parsed or compiled
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise DictionaryError(f"Cannot read dictionary {path}: {e}") from e
    except yaml.YAMLError as e:
        raise DictionaryError(f"Invalid YAML in dictionary {path}: {e}") from e

    compiled = parse_dictionary(data, source=str(path))
    logger.debug("Loaded dictionary %s (%s)", path, ", ".join(compiled) or "empty")
    return compiled
