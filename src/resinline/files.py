"""Source discovery and file I/O.

:func:`discover_sources` walks a project directory and selects the files
to rewrite with gitignore-compatible pattern matching (via :mod:`pathspec`).
:func:`read_source` and :func:`write_source` perform the blocking I/O that
:mod:`resinline.runner` offloads to worker threads.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

import pathspec

from resinline.models import SourceUnit

logger = logging.getLogger(__name__)


def discover_sources(
    project_path: str | Path,
    include_patterns: list[str] | None = None,
    exclude_patterns: list[str] | None = None,
) -> list[SourceUnit]:
    """Walk *project_path* and return the source units to process.

    Hidden directories and dotfiles are skipped, as a default recursive
    glob would. A root that does not exist (or is not a directory) yields
    an empty list rather than an error.

    Args:
        project_path: Root directory to scan.
        include_patterns: Gitignore-style patterns to include. Defaults to
            ``["**/*.ts"]``.
        exclude_patterns: Gitignore-style patterns to exclude.

    Returns:
        One :class:`~resinline.models.SourceUnit` per matching file, sorted
        by relative path.
    """
    root = Path(project_path)
    if not root.is_dir():
        return []

    include_spec = pathspec.PathSpec.from_lines("gitwildmatch", include_patterns or ["**/*.ts"])
    exclude_spec = (
        pathspec.PathSpec.from_lines("gitwildmatch", exclude_patterns) if exclude_patterns else None
    )

    units: list[SourceUnit] = []
    for dirpath, dirnames, filenames in os.walk(str(root)):
        rel_dir = os.path.relpath(dirpath, str(root))

        # Prune hidden directories in place.
        dirnames[:] = [d for d in dirnames if not d.startswith(".")]

        for fname in filenames:
            if fname.startswith("."):
                continue
            rel_path = os.path.join(rel_dir, fname) if rel_dir != "." else fname
            rel_path = Path(rel_path).as_posix()
            if not include_spec.match_file(rel_path):
                continue
            if exclude_spec and exclude_spec.match_file(rel_path):
                continue
            units.append(SourceUnit(relative_path=rel_path, path=Path(dirpath) / fname))

    units.sort(key=lambda unit: unit.relative_path)
    logger.debug("Discovered %d source file(s) under %s", len(units), root)
    return units


def read_source(path: Path, encoding: str = "utf-8") -> str:
    """Read the full text of *path*.

    Decoding is strict: bytes that are invalid in *encoding* fail the unit
    instead of being replaced with U+FFFD.
    """
    with open(path, "r", encoding=encoding, newline="") as f:
        return f.read()


def write_source(path: Path, data: str, encoding: str = "utf-8") -> None:
    """Replace the content of *path* atomically using temp file + rename.

    The temporary file is created in the same directory as *path* so that
    ``os.replace`` is an atomic rename on POSIX systems. On any failure the
    temp file is cleaned up and the original file is left untouched.

    A symlinked *path* is written through: the file it points to gets the
    new content and the link itself stays in place.
    """
    path = Path(os.path.realpath(path))
    fd = None
    tmp_path: Optional[str] = None
    try:
        fd = tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
            encoding=encoding,
            newline="",
        )
        tmp_path = fd.name
        fd.write(data)
        fd.flush()
        os.fsync(fd.fileno())
        fd.close()
        fd = None  # prevent double-close in finally
        _copy_mode(path, tmp_path)
        os.replace(tmp_path, path)
    except BaseException:
        # Clean up the temp file on any error (including KeyboardInterrupt).
        if fd is not None:
            fd.close()
        if tmp_path is not None:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
        raise


def _copy_mode(source: Path, target: str) -> None:
    """Carry the permission bits of *source* over to *target*."""
    try:
        mode = source.stat().st_mode
    except FileNotFoundError:
        return
    os.chmod(target, mode & 0o7777)
