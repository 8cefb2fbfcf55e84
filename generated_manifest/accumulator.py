"""Assemble the set of type names produced from generated sources."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from .locator import find_nested_type_names
from .paths import source_id_to_type_name, type_name_to_physical_path

logger = logging.getLogger(__name__)


def type_names_for_source(output_root: Path, source_id: str) -> set[str]:
    """Primary plus nested type names for one generated source.

    Empty when the source left no compiled artifact (e.g. skipped by the
    compiler); that is not an error.
    """
    type_name = source_id_to_type_name(source_id)
    artifact = output_root / type_name_to_physical_path(type_name)
    if not artifact.exists():
        logger.debug("no artifact for %s (expected %s)", source_id, artifact)
        return set()
    names = {type_name}
    names.update(find_nested_type_names(output_root, type_name))
    logger.debug("%s -> %s", source_id, sorted(names))
    return names


def collect_type_names(
    output_root: Path | str, source_ids: Iterable[str], workers: int = 1
) -> set[str]:
    """Return every type name with a materialized artifact under ``output_root``.

    With ``workers > 1`` each source is resolved on a thread pool and the
    per-source sets are merged once all tasks finish. Any ``OSError`` raised
    while listing a directory propagates unchanged.
    """
    root = Path(output_root)
    sources = list(source_ids)
    names: set[str] = set()
    if workers > 1 and len(sources) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            for partial in pool.map(lambda s: type_names_for_source(root, s), sources):
                names |= partial
    else:
        for source_id in sources:
            names |= type_names_for_source(root, source_id)
    logger.info(
        "Collected %d generated type names from %d sources", len(names), len(sources)
    )
    return names


__all__ = ["collect_type_names", "type_names_for_source"]
