"""YAML context store shared between the generator step and post-compile step.

The generator step records which sources it emitted and for which release;
the post-compile step reads both back. A missing file means the generator did
not run, which makes the post-compile step a no-op.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError

from .release import ReleaseId

logger = logging.getLogger(__name__)


class BuildContext(BaseModel):
    """Inputs handed from the generator step to the post-compile step."""

    generated_files: list[str] | None = None
    release_id: ReleaseId | None = None

    def is_empty(self) -> bool:
        return not self.generated_files or self.release_id is None


def load_context(path: Path | str) -> BuildContext:
    path = Path(path)
    if not path.exists():
        logger.debug("No build context at %s", path)
        return BuildContext()
    with open(path, encoding="utf-8") as fh:
        try:
            data = yaml.safe_load(fh) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Malformed build context file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Malformed build context file: {path}")
    try:
        return BuildContext.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid build context in {path}:\n{e}") from e


def record_context(
    path: Path | str, generated_files: Iterable[str], release_id: ReleaseId
) -> Path:
    """Write (replacing) the context store for the next build step."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = {"generated_files": list(generated_files), "release_id": str(release_id)}
    with open(path, "w", encoding="utf-8") as fh:
        yaml.safe_dump(data, fh, sort_keys=False, allow_unicode=True, width=80)
    logger.debug("Recorded %d generated files in %s", len(data["generated_files"]), path)
    return path


__all__ = ["BuildContext", "load_context", "record_context"]
