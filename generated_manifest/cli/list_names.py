"""`list` command: print the type names recorded in a manifest."""

from __future__ import annotations

from pathlib import Path

import click

from ..release import ReleaseId
from ..writer import read_manifest
from .post_compile import _parse_release


@click.command("list")
@click.argument(
    "output_dir",
    envvar="GENERATED_MANIFEST_OUTPUT_DIR",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.option(
    "--release",
    "release_id",
    required=True,
    callback=_parse_release,
    help="Release id as group:artifact:version",
)
def list_cmd(output_dir: Path, release_id: ReleaseId):
    """List generated type names recorded for RELEASE under OUTPUT_DIR."""
    names = read_manifest(output_dir, release_id)
    if names is None:
        click.echo(f"No manifest for {release_id} in {output_dir}", err=True)
        raise SystemExit(1)
    for name in sorted(names):
        click.echo(name)


__all__ = ["list_cmd"]
