"""`record` and `post-compile` commands.

`record` is called by the code generator once it knows which sources it
emitted; `post-compile` runs after the compiler and writes the manifest.
"""

from __future__ import annotations

from pathlib import Path

import click

from ..context import load_context, record_context
from ..paths import CONTEXT_FILENAME, OutputPaths
from ..release import ReleaseId
from ..step import run_post_compile


def _parse_release(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> ReleaseId | None:
    if value is None:
        return None
    try:
        return ReleaseId.parse(value)
    except ValueError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param) from e


@click.command("record")
@click.argument("context_file", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--release",
    "release_id",
    required=True,
    callback=_parse_release,
    help="Release id as group:artifact:version",
)
@click.option(
    "--source",
    "sources",
    multiple=True,
    required=True,
    help="Generated source path relative to its source root (repeatable)",
)
def record_cmd(context_file: Path, release_id: ReleaseId, sources: tuple[str, ...]):
    """Record generated sources and release id for the post-compile step."""
    path = record_context(context_file, sources, release_id)
    click.echo(f"Recorded {len(sources)} generated sources -> {path}")


@click.command("post-compile")
@click.argument(
    "output_dir",
    envvar="GENERATED_MANIFEST_OUTPUT_DIR",
    type=click.Path(file_okay=False, path_type=Path),
)
@click.option(
    "--context",
    "context_file",
    envvar="GENERATED_MANIFEST_CONTEXT",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Context store (env: GENERATED_MANIFEST_CONTEXT) (default: <output_dir>/../{CONTEXT_FILENAME})",
)
@click.option(
    "--source",
    "sources",
    multiple=True,
    help="Generated source path; overrides the context store (repeatable)",
)
@click.option(
    "--release",
    "release_id",
    default=None,
    callback=_parse_release,
    help="Release id as group:artifact:version; overrides the context store",
)
@click.option(
    "--write-empty/--no-write-empty",
    default=True,
    help="Write an empty manifest when no generated artifacts are found",
)
@click.option(
    "--workers",
    envvar="GENERATED_MANIFEST_WORKERS",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Threads used to list output directories (env: GENERATED_MANIFEST_WORKERS)",
)
@click.option(
    "--strict", is_flag=True, help="Exit non-zero when the manifest cannot be written"
)
def post_compile_cmd(
    output_dir: Path,
    context_file: Path | None,
    sources: tuple[str, ...],
    release_id: ReleaseId | None,
    write_empty: bool,
    workers: int,
    strict: bool,
):
    """Write the generated-class-names manifest into OUTPUT_DIR.

    A failure is reported as a warning and the command still succeeds, since
    the packaged output works without the manifest. Use --strict to fail.
    """
    paths = OutputPaths(output_dir, context_file)
    try:
        context = load_context(paths.context_path)
    except (OSError, ValueError) as e:
        click.echo(f"Warning: cannot read build context: {e}", err=True)
        if strict:
            raise SystemExit(1)
        return

    generated_files = list(sources) if sources else context.generated_files
    release = release_id if release_id is not None else context.release_id

    result = run_post_compile(
        paths.output_root,
        generated_files,
        release,
        write_empty=write_empty,
        workers=workers,
    )
    match result.status:
        case "written":
            click.echo(
                f"Wrote manifest ({len(result.type_names)} types) -> {result.manifest_path}"
            )
        case "skipped":
            click.echo(f"Nothing to do: {result.reason}")
        case _:
            click.echo(f"Warning: {result.warning_message()}", err=True)
            if strict:
                raise SystemExit(1)


__all__ = ["record_cmd", "post_compile_cmd"]
