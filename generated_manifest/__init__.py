import importlib.metadata
import logging
import os

# ---------------------------------------------------------------------------
# Version metadata
# ---------------------------------------------------------------------------
# In-tree execution (tests before an editable install) has no distribution
# metadata; fall back to a neutral placeholder.
try:  # pragma: no cover - trivial guard
    try:
        __version__ = importlib.metadata.version("generated-manifest")
    except KeyError:  # metadata object exists but lacks 'Version' key
        __version__ = "0.0.0"
except importlib.metadata.PackageNotFoundError:  # distribution not installed
    __version__ = "0.0.0"


def _configure_logging():  # lightweight, idempotent
    if getattr(_configure_logging, "_done", False):  # type: ignore[attr-defined]
        return
    level_name = os.getenv("GENERATED_MANIFEST_LOG_LEVEL", "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(level=level, format="[%(levelname)s] %(name)s: %(message)s")
    _configure_logging._done = True  # type: ignore[attr-defined]


__all__ = ["__version__"]
