"""Serialize and persist the generated-class-names manifest."""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Iterable
from pathlib import Path

from .paths import manifest_path
from .release import ReleaseId, manifest_logical_path

logger = logging.getLogger(__name__)


def serialize_manifest(names: Iterable[str]) -> str:
    """One type name per line, sorted, newline terminated.

    Sorting makes repeated builds byte-identical. An empty set serializes to
    an empty string. Names that came from undecodable file names keep
    their original bytes on disk (``surrogateescape``).
    """
    unique = sorted(set(names))
    return "".join(f"{name}\n" for name in unique)


def parse_manifest(text: str) -> set[str]:
    return {line.strip() for line in text.splitlines() if line.strip()}


def write_manifest(
    output_root: Path | str, release_id: ReleaseId, names: Iterable[str]
) -> Path:
    """Atomically replace the manifest for ``release_id``; return its path.

    Content goes to a temporary file in the destination directory which is
    then renamed over the target, so readers see either the old or the new
    manifest. On failure the temporary file is removed and the error is
    re-raised.
    """
    path = manifest_path(output_root, release_id)
    path.parent.mkdir(parents=True, exist_ok=True)
    content = serialize_manifest(names)

    fd, tmp_name = tempfile.mkstemp(
        dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(
            fd, "w", encoding="utf-8", errors="surrogateescape", newline="\n"
        ) as fh:
            fh.write(content)
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise
    logger.info("%s is added", manifest_logical_path(release_id))
    return path


def read_manifest(output_root: Path | str, release_id: ReleaseId) -> set[str] | None:
    """Return the manifest's type names, or ``None`` if it was never written."""
    path = manifest_path(output_root, release_id)
    if not path.exists():
        return None
    return parse_manifest(
        path.read_text(encoding="utf-8", errors="surrogateescape")
    )


__all__ = [
    "manifest_path",
    "serialize_manifest",
    "parse_manifest",
    "write_manifest",
    "read_manifest",
]
