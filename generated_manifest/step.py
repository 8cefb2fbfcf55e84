"""Post-compile step: discover generated type names and write the manifest.

:func:`run_post_compile` never raises for I/O or encoding problems. It reports them as a
``failed`` :class:`ManifestResult` and leaves the decision of how loudly to
complain to the caller (build hook or CLI).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from .accumulator import collect_type_names
from .paths import manifest_path
from .release import ReleaseId
from .writer import write_manifest

logger = logging.getLogger(__name__)


class ManifestResult(BaseModel):
    """Outcome of one post-compile run."""

    status: Literal["written", "skipped", "failed"]
    manifest_path: Path | None = None
    type_names: list[str] = Field(default_factory=list)
    reason: str | None = None
    error_type: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status != "failed"

    def warning_message(self) -> str:
        return (
            f"Failed to produce generated-class-names file ({self.error_type}: "
            f"{self.error}). But it's not critical so you can still use the "
            "packaged output."
        )


def run_post_compile(
    output_root: Path | str,
    generated_files: Sequence[str] | None,
    release_id: ReleaseId | None,
    *,
    write_empty: bool = True,
    workers: int = 1,
) -> ManifestResult:
    """Write the generated-class-names manifest for ``release_id``.

    Missing inputs make the step a no-op (``skipped``). An empty name set
    still writes an empty manifest unless ``write_empty`` is False, in which
    case any existing manifest for ``release_id`` is removed.
    """
    if not generated_files:
        return ManifestResult(status="skipped", reason="no generated files recorded")
    if release_id is None:
        return ManifestResult(status="skipped", reason="no release id recorded")

    output_root = Path(output_root)
    logger.info("output directory: %s", output_root)
    logger.debug("generated files: %s", list(generated_files))
    try:
        names = collect_type_names(output_root, generated_files, workers=workers)
        if not names and not write_empty:
            # omitted, not stale: drop any manifest left by an earlier build
            manifest_path(output_root, release_id).unlink(missing_ok=True)
            return ManifestResult(status="skipped", reason="no generated artifacts")
        path = write_manifest(output_root, release_id, names)
    except (OSError, ValueError) as e:
        logger.debug("manifest generation failed", exc_info=True)
        return ManifestResult(
            status="failed", error_type=type(e).__name__, error=str(e)
        )
    # names come straight from directory listings and may carry surrogate
    # escapes, so skip re-validation
    return ManifestResult.model_construct(
        status="written",
        manifest_path=path,
        type_names=sorted(names),
        reason=None,
        error_type=None,
        error=None,
    )


__all__ = ["ManifestResult", "run_post_compile"]
