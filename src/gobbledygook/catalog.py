"""Fake-translate a whole catalog of UI strings at once."""

import json
import logging
import os
from typing import Any

from gobbledygook.translator import translate

log = logging.getLogger(__name__)


class CatalogFormatError(ValueError):
    """The catalog isn't a JSON object or list of strings."""


def translate_catalog(catalog: Any) -> dict[str, str]:
    """Fake-translate a parsed catalog.

    A list of strings maps each string to its translation.
    An object maps each key to the translation of its value.
    """
    if isinstance(catalog, list):
        items = [(string, string) for string in catalog]
    elif isinstance(catalog, dict):
        items = list(catalog.items())
    else:
        raise CatalogFormatError(f"Expected a JSON object or list, got {type(catalog).__name__}")

    localizations: dict[str, str] = {}
    for key, base_string in items:
        if not isinstance(base_string, str):
            raise CatalogFormatError(f"Expected a string for {key!r}, got {type(base_string).__name__}")
        if key in localizations:
            log.warning("Duplicate string in catalog: %r", key)
        localizations[key] = translate(base_string)
    return localizations

def load_catalog(file_path: str) -> Any:
    with open(file_path, "r", encoding="utf-8") as f:
        return json.load(f)

def dump_localizations(localizations: dict[str, str]) -> str:
    return json.dumps(localizations, ensure_ascii=False, indent="\t") + "\n"

def translate_catalog_file(input_path: str, output_path: str | None = None) -> dict[str, str]:
    """Fake-translate a JSON catalog file, writing the result as JSON if an output path is given."""
    localizations = translate_catalog(load_catalog(input_path))
    log.info("Translated %d strings from %s", len(localizations), input_path)
    if output_path is not None:
        output_dir = os.path.dirname(output_path)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(dump_localizations(localizations))
        log.info("Wrote %s", output_path)
    return localizations
