"""Environment configuration."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from fieldrules.dictionary import load_dictionary
from fieldrules.registry import MessageCatalog, default_messages
from fieldrules.types import DEFAULT_LOCALE

logger = logging.getLogger(__name__)


@dataclass
class FieldRulesConfig:
    """Runtime configuration.

    Attributes:
        locale: Locale for validators created by the CLI
        dictionary_paths: YAML dictionaries loaded into the message catalog
    """

    locale: str = DEFAULT_LOCALE
    dictionary_paths: list[Path] = field(default_factory=list)

    @classmethod
    def from_env(cls) -> FieldRulesConfig:
        """Create config from environment variables.

        - FIELDRULES_LOCALE: default locale (falls back to "en")
        - FIELDRULES_DICTIONARY: dictionary paths separated by os.pathsep
        """
        locale = os.environ.get("FIELDRULES_LOCALE") or DEFAULT_LOCALE

        raw_paths = os.environ.get("FIELDRULES_DICTIONARY", "")
        paths = [Path(p) for p in raw_paths.split(os.pathsep) if p]

        return cls(locale=locale, dictionary_paths=paths)


def configure(config: FieldRulesConfig, catalog: MessageCatalog | None = None) -> None:
    """Load the configured dictionaries into a catalog (the default one if omitted).

    Missing files are skipped with a warning; malformed ones raise DictionaryError.
    """
    catalog = catalog if catalog is not None else default_messages
    for path in config.dictionary_paths:
        if not path.exists():
            logger.warning("Dictionary %s not found, skipping", path)
            continue
        catalog.update(load_dictionary(path))
