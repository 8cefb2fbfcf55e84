"""Path and name conversions for compiled artifacts.

Three representations of the same thing are in play:

* logical path: ``com/acme/gen/Rules.java`` (always ``/`` separated, as
  recorded by the code generator)
* type name: ``com.acme.gen.Rules``
* physical path: ``com/acme/gen/Rules.class`` using the platform separator,
  relative to the build output directory

The conversion functions are pure; none of them touch the filesystem.

:class:`OutputPaths` resolves the build output directory and the inter-step
context file. Like the rest of this module it performs no filesystem changes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from .release import ReleaseId, manifest_logical_path

CLASS_EXTENSION = ".class"
NESTED_TYPE_MARKER = "$"
LOGICAL_SEPARATOR = "/"
CONTEXT_FILENAME = "generated-manifest.yml"


def strip_extension(path: str) -> str:
    """Drop everything from the last ``.`` onwards (no-op without one)."""
    i = path.rfind(".")
    return path if i == -1 else path[:i]


def source_id_to_type_name(source_id: str) -> str:
    # logical ids always use '/'
    if source_id.startswith("./"):
        source_id = source_id[2:]
    return strip_extension(source_id).replace(LOGICAL_SEPARATOR, ".")


def physical_path_to_type_name(path: str) -> str:
    if path.startswith("." + os.sep):
        path = path[2:]
    return strip_extension(path).replace(os.sep, ".")


def type_name_to_physical_path(type_name: str) -> str:
    return type_name.replace(".", os.sep) + CLASS_EXTENSION


def logical_path_to_physical_path(path: str) -> str:
    return path.replace(LOGICAL_SEPARATOR, os.sep)


def manifest_path(output_root: Path | str, release_id: ReleaseId) -> Path:
    """Physical manifest location for ``release_id`` under ``output_root``."""
    return Path(output_root) / logical_path_to_physical_path(
        manifest_logical_path(release_id)
    )


@dataclass
class OutputPaths:
    """Resolve the compiled output directory and the context store file.

    Parameters
    ----------
    output : Path | str
        Build output directory holding compiled artifacts (required).
    context : Path | str | None
        Context store written by the generator step. ``None`` -> sibling of
        the output directory named ``generated-manifest.yml``. A relative
        value is interpreted relative to ``base``.
    base : Path | str | None
        Directory relative paths are resolved against (default: CWD).
    """

    output: Path | str
    context: Path | str | None = None
    base: Path | str | None = None

    output_root: Path = field(init=False)
    context_path: Path = field(init=False)

    def __post_init__(self) -> None:
        base = Path(self.base) if self.base is not None else Path.cwd()
        self.output_root = self._resolve(base, self.output)
        if self.context is None or str(self.context).strip() == "":
            self.context_path = self.output_root.parent / CONTEXT_FILENAME
        else:
            self.context_path = self._resolve(base, self.context)

    @staticmethod
    def _resolve(base: Path, value: Path | str) -> Path:
        p = Path(value).expanduser()
        if not p.is_absolute():
            p = base / p
        return p.resolve()


__all__ = [
    "CLASS_EXTENSION",
    "NESTED_TYPE_MARKER",
    "CONTEXT_FILENAME",
    "OutputPaths",
    "strip_extension",
    "source_id_to_type_name",
    "physical_path_to_type_name",
    "type_name_to_physical_path",
    "logical_path_to_physical_path",
    "manifest_path",
]
