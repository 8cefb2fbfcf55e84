"""Hatch build hook running the post-compile manifest step.

Enable in a project's ``pyproject.toml``::

    [tool.hatch.build.hooks.generated-manifest]
    output-directory = "build/classes"
    context-file = "build/generated-manifest.yml"   # optional
    write-empty = true                              # optional
    workers = 1                                     # optional

A failing step is reported as a warning; the build always continues.
"""

from __future__ import annotations

from hatchling.builders.hooks.plugin.interface import BuildHookInterface
from hatchling.plugin import hookimpl

from . import _configure_logging
from .context import load_context
from .paths import OutputPaths
from .release import manifest_logical_path
from .step import run_post_compile


class ManifestBuildHook(BuildHookInterface):
    """Write the generated-class-names manifest and ship it with the build."""

    PLUGIN_NAME = "generated-manifest"

    def initialize(self, version: str, build_data: dict) -> None:
        """Run the post-compile step; any failure only produces a warning."""
        _configure_logging()
        try:
            self._add_manifest(build_data)
        except Exception as e:
            self.app.display_warning(
                f"Failed to produce generated-class-names file ({type(e).__name__}: "
                f"{e}). But it's not critical so you can still use the packaged output."
            )

    def _add_manifest(self, build_data: dict) -> None:
        output = self.config.get("output-directory")
        if not output:
            self.app.display_warning(
                "generated-manifest: 'output-directory' is not configured, skipping"
            )
            return

        paths = OutputPaths(output, self.config.get("context-file"), base=self.root)
        try:
            context = load_context(paths.context_path)
        except (OSError, ValueError) as e:
            self.app.display_warning(f"generated-manifest: cannot read build context: {e}")
            return
        if context.is_empty():
            self.app.display_debug("generated-manifest: nothing recorded, skipping")
            return

        result = run_post_compile(
            paths.output_root,
            context.generated_files,
            context.release_id,
            write_empty=bool(self.config.get("write-empty", True)),
            workers=int(self.config.get("workers", 1)),
        )
        if not result.ok:
            self.app.display_warning(result.warning_message())
            return
        if result.status == "skipped":
            self.app.display_debug(f"generated-manifest: skipped ({result.reason})")
            return

        target = manifest_logical_path(context.release_id)
        build_data.setdefault("force_include", {})[str(result.manifest_path)] = target
        self.app.display_info(
            f"{target} is added ({len(result.type_names)} generated types)"
        )


@hookimpl
def hatch_register_build_hook():
    return ManifestBuildHook


__all__ = ["ManifestBuildHook", "hatch_register_build_hook"]
