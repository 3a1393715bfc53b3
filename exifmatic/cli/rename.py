"""Compute a filename from a metadata dump and optionally rename a photo.

The command is exposed as ``exifmatic-cli rename``.  Without a FILE argument
the computed name is printed; with one, FILE is renamed and a
``FILE -> TARGET`` line is printed.

Key flags
------------
* ``--exif``        – ``key: value`` metadata side-car (required).
* ``--pattern``     – filename pattern; falls back to ``pattern`` in the config.
* ``--target-dir``  – place the renamed file in this directory.
* ``--overwrite``   – replace an existing file at the target.
* ``--dry-run``     – show the rename without touching the file-system.
"""

from __future__ import annotations

from pathlib import Path

import click
import structlog

from exifmatic.pipelines.rename import rename_from_metadata
from exifmatic.utils.display import echo_rename, echo_warning
from exifmatic.utils.errors import ExifmaticError

log = structlog.get_logger()


@click.command(
    name="rename",
    help="Rename FILE using a pattern filled from its metadata dump.",
    context_settings=dict(help_option_names=["-h", "--help"], max_content_width=120),
)
@click.argument("file", required=False, type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "-e",
    "--exif",
    "exif_path",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Metadata file with one 'key: value' pair per line.",
)
@click.option("-p", "--pattern", help="Filename pattern, e.g. '{y}{m}{D}_{t}.{e}'.")
@click.option(
    "-d",
    "--target-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory receiving the renamed file (default: working directory).",
)
@click.option("--overwrite", is_flag=True, help="Replace an existing file at the target.")
@click.option("--dry-run", is_flag=True, help="Only show the rename; do not modify the file-system.")
@click.pass_obj
def cli(  # noqa: D401 – Click callback naming rule
    ctx_obj,
    file: Path | None,
    exif_path: Path,
    pattern: str | None,
    target_dir: Path | None,
    overwrite: bool,
    dry_run: bool,
) -> None:
    """Entry-point for ``exifmatic-cli rename``.

    Args:
        ctx_obj:     Click context with global flags already parsed.
        file:        Photo to rename; *None* prints the computed name only.
        exif_path:   Metadata side-car.
        pattern:     Filename pattern; defaults to the configured one.
        target_dir:  Optional destination directory.
        overwrite:   Replace an existing target.
        dry_run:     Perform a trial run without renaming anything.
    """
    cfg = ctx_obj["cfg"]
    if pattern is None:
        pattern = cfg.pattern
    if pattern is None:
        raise click.UsageError("No pattern given – pass --pattern or set 'pattern' in the config.")

    try:
        result = rename_from_metadata(
            exif_path,
            pattern,
            file,
            config=cfg,
            target_dir=target_dir,
            overwrite=True if overwrite else None,
            dry_run=dry_run,
        )
    except ExifmaticError as exc:
        log.debug("rename_aborted", error=str(exc))
        raise click.ClickException(str(exc)) from exc

    if result.source is None:
        click.echo(result.filename if target_dir is None else str(result.target))
    elif not result.changed and not result.dry_run:
        echo_warning(f"{result.source} already has the name {result.target}")
    else:
        echo_rename(str(result.source), str(result.target), dry_run=result.dry_run)
