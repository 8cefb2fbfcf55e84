"""Discover compiler byproducts (nested/inner types) of a primary artifact."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .paths import (
    CLASS_EXTENSION,
    NESTED_TYPE_MARKER,
    strip_extension,
    type_name_to_physical_path,
)

logger = logging.getLogger(__name__)


def find_nested_type_names(output_root: Path | str, type_name: str) -> set[str]:
    """Return type names of artifacts nested under ``type_name``.

    Lists the primary artifact's directory once (non-recursive; the compiler
    always writes nested types beside their outer type) and keeps ``.class``
    entries named ``<SimpleName>$...``. Only call this for a primary whose
    artifact exists.

    Raises ``OSError`` when the directory cannot be listed.
    """
    package, _, simple_name = type_name.rpartition(".")
    directory = Path(output_root, type_name_to_physical_path(type_name)).parent
    prefix = simple_name + NESTED_TYPE_MARKER

    found: set[str] = set()
    with os.scandir(directory) as entries:
        for entry in entries:
            if not entry.name.endswith(CLASS_EXTENSION):
                continue
            if not entry.name.startswith(prefix):
                continue
            stem = strip_extension(entry.name)
            nested = f"{package}.{stem}" if package else stem
            logger.debug("nested type of %s: %s", type_name, nested)
            found.add(nested)
    return found


__all__ = ["find_nested_type_names"]
