"""List the variables a pattern may reference for one metadata dump.

Exposed as ``exifmatic-cli vars``.  Raw metadata fields and derived codes are
printed together, exactly as the formatter sees them (raw values win when a
name exists in both).
"""

from __future__ import annotations

from pathlib import Path

import click

from exifmatic.io.files import read_metadata_text
from exifmatic.pipelines.rename import collect_variables
from exifmatic.utils.display import echo_variables
from exifmatic.utils.errors import ExifmaticError


@click.command(
    name="vars",
    help="Print every variable available to patterns for a metadata file.",
    context_settings=dict(help_option_names=["-h", "--help"], max_content_width=120),
)
@click.option(
    "-e",
    "--exif",
    "exif_path",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Metadata file with one 'key: value' pair per line.",
)
@click.pass_obj
def cli(ctx_obj, exif_path: Path) -> None:  # noqa: D401 – Click callback naming rule
    """Entry-point for ``exifmatic-cli vars``."""
    try:
        text = read_metadata_text(exif_path)
    except ExifmaticError as exc:
        raise click.ClickException(str(exc)) from exc
    echo_variables(collect_variables(text, config=ctx_obj["cfg"]))
