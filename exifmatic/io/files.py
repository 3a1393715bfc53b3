"""File-system boundaries: read the metadata side-car, rename the photo.

Both helpers turn :class:`OSError` into exifmatic errors carrying the path
and the underlying cause, so the CLI can report them without a traceback.
The rename itself is a single :meth:`pathlib.Path.rename` (or
:meth:`~pathlib.Path.replace` when overwriting), so a failure never leaves a
half-written file behind.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import structlog

from ..models import RenameResult
from ..utils.errors import MetadataReadError, RenameError

log = structlog.get_logger()

__all__ = ["read_metadata_text", "rename_file", "resolve_target"]


def read_metadata_text(path: Path) -> str:
    """Return the text content of the metadata file at *path*.

    Undecodable bytes are replaced rather than rejected; vendor tags in
    metadata dumps are not always valid UTF-8.

    Raises:
        MetadataReadError: When the file is missing or unreadable.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as err:
        log.error("metadata_unreadable", path=str(path), error=str(err))
        raise MetadataReadError(path, err) from err
    log.debug("metadata_read", path=str(path), size=len(text))
    return text


def resolve_target(filename: str, target_dir: Optional[Path] = None) -> Path:
    """Return where *filename* lands: inside *target_dir* or relative to the CWD."""
    if target_dir is None:
        return Path(filename)
    return Path(target_dir) / filename


def rename_file(
    source: Path,
    filename: str,
    *,
    target_dir: Optional[Path] = None,
    overwrite: bool = False,
    dry_run: bool = False,
) -> RenameResult:
    """Rename *source* to *filename*.

    Args:
        source: Existing file to rename.
        filename: Computed filename (the pattern output).
        target_dir: Directory that receives the file.  *None* keeps the
            historical behaviour of resolving *filename* against the working
            directory.
        overwrite: Replace an existing file at the target.
        dry_run: Only report what would happen.

    Returns:
        :class:`RenameResult` describing the outcome.  ``changed`` is
        ``False`` when the file already has the computed name or on dry runs.

    Raises:
        RenameError: When *source* is missing, the target exists and
            *overwrite* is false, or the operating system refuses the rename.
    """
    source = Path(source)
    target = resolve_target(filename, target_dir)
    result = dict(source=source, target=target, filename=filename, dry_run=dry_run)

    if not source.exists():
        raise RenameError(source, target, "source file does not exist")

    same_file = target.exists() and target.samefile(source)
    same_dir = target.parent.resolve() == source.parent.resolve()
    if same_file and same_dir and target.name == source.name:
        log.info("rename_skipped", source=str(source), reason="already named")
        return RenameResult(**result)

    # On case-insensitive file systems a case-only rename sees its own source
    # as an existing target.
    case_only = same_file and same_dir and target.name.casefold() == source.name.casefold()

    if target.exists() and not (overwrite or case_only):
        log.warning("rename_collision", source=str(source), target=str(target))
        raise RenameError(source, target, "target already exists")

    if dry_run:
        log.info("rename_planned", source=str(source), target=str(target))
        return RenameResult(**result)

    # The existence check above is not atomic with the rename: on POSIX a file
    # created at the target in between is replaced by Path.rename as well.
    try:
        if overwrite or case_only:
            source.replace(target)
        else:
            source.rename(target)
    except OSError as err:
        log.error("rename_failed", source=str(source), target=str(target), error=str(err))
        raise RenameError(source, target, err.strerror or str(err)) from err

    log.info("renamed", source=str(source), target=str(target))
    return RenameResult(**result, changed=True)
