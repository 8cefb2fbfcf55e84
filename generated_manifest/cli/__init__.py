"""CLI command group for generated-manifest.

This module exposes the root Click command group `generated_manifest` which
aggregates subcommands implemented in sibling modules.

Example usage:

        generated-manifest record build/generated-manifest.yml \
            --release acme:rules:1.0 --source com/acme/gen/Rules.java
        generated-manifest post-compile build/classes
        generated-manifest list build/classes --release acme:rules:1.0
"""

from __future__ import annotations

import logging

import click

from .. import __version__, _configure_logging
from .list_names import list_cmd
from .post_compile import post_compile_cmd, record_cmd

logger = logging.getLogger(__name__)


def _print_version(
    ctx: click.Context, param: click.Parameter, value: bool
) -> None:  # pragma: no cover - simple utility
    """Callback to print only the raw version and exit early."""
    if not value or ctx.resilient_parsing:
        return
    click.echo(__version__)
    ctx.exit()


@click.group()
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show the generated-manifest version and exit (raw version only).",
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Set the logging level (default: env GENERATED_MANIFEST_LOG_LEVEL or WARNING)",
)
def generated_manifest(log_level: str | None):
    """Generated-class manifest build commands."""
    _configure_logging()
    if log_level is not None:
        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, log_level))
        for handler in root_logger.handlers:
            handler.setLevel(getattr(logging, log_level))
        logger.debug(f"Set logging level to {log_level}")


# Register subcommands
generated_manifest.add_command(record_cmd)
generated_manifest.add_command(post_compile_cmd)
generated_manifest.add_command(list_cmd)

__all__ = ["generated_manifest"]
