"""Orchestrate one rename: read metadata, compute the filename, move the file.

:func:`build_filename` is the pure core (text in, filename out) and is safe to
call concurrently for many files.  :func:`rename_from_metadata` adds the two
file-system boundaries around it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

import structlog

from ..config.schema import ConfigSchema
from ..io.files import read_metadata_text, rename_file, resolve_target
from ..metadata import parse_metadata
from ..models import RenameResult
from ..templating import format_pattern
from ..variables import derive_variables, merge

log = structlog.get_logger()

__all__ = ["collect_variables", "build_filename", "rename_from_metadata"]


def collect_variables(text: str, *, config: Optional[ConfigSchema] = None) -> Dict[str, str]:
    """Return the merged variable mapping for the metadata in *text*.

    Derived variables form the base; raw metadata fields overlay them.
    """
    raw = parse_metadata(text)
    return merge(derive_variables(raw, config=config), raw)


def build_filename(
    text: str, pattern: str, *, config: Optional[ConfigSchema] = None
) -> str:
    """Return the filename *pattern* yields for the metadata in *text*.

    Raises:
        PatternError: When *pattern* references an unknown variable or has
            unbalanced braces.
    """
    filename = format_pattern(pattern, collect_variables(text, config=config))
    log.debug("filename_built", pattern=pattern, filename=filename)
    return filename


def rename_from_metadata(
    metadata_path: Path,
    pattern: str,
    source: Optional[Path] = None,
    *,
    config: Optional[ConfigSchema] = None,
    target_dir: Optional[Path] = None,
    overwrite: Optional[bool] = None,
    dry_run: bool = False,
) -> RenameResult:
    """Compute the filename for *metadata_path* and optionally rename *source*.

    Args:
        metadata_path: ``key: value`` metadata side-car.
        pattern: Filename pattern.
        source: File to rename.  When *None* nothing is renamed and the result
            only carries the computed name.
        config: Optional configuration; also supplies the default for
            *overwrite*.
        target_dir: Directory receiving the renamed file.
        overwrite: Replace an existing target.  *None* defers to
            ``config.rename.overwrite``.
        dry_run: Report without renaming.

    Raises:
        MetadataReadError: When the side-car cannot be read.
        PatternError: When the pattern cannot be formatted.
        RenameError: When the rename fails.
    """
    text = read_metadata_text(metadata_path)
    filename = build_filename(text, pattern, config=config)

    if source is None:
        return RenameResult(target=resolve_target(filename, target_dir), filename=filename)

    if overwrite is None:
        overwrite = config.rename.overwrite if config is not None else False
    return rename_file(
        source,
        filename,
        target_dir=target_dir,
        overwrite=overwrite,
        dry_run=dry_run,
    )
