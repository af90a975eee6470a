"""Filesystem helpers: enumerate candidate files and copy the selection."""

from __future__ import annotations

import shutil
from pathlib import Path

from .services.errors import CopyError, EnumerationError

_COPY_CHUNK_SIZE = 1024 * 1024


def find_files(root: Path) -> list[str]:
    """List every non-directory entry under ``root``.

    Entries are returned relative to ``root`` with ``/`` separators. Each
    directory is read in sorted order so repeated calls on an unchanged tree
    return the same list. Symlinks are listed, never followed.

    Args:
        root: Directory to walk.

    Returns:
        Relative paths of all files below ``root``.

    Raises:
        EnumerationError: If ``root`` is missing or any directory is
            unreadable. No partial result is returned.
    """
    if not root.is_dir():
        raise EnumerationError(f"search directory '{root}' is not a directory")
    files: list[str] = []
    pending = [root]
    while pending:
        directory = pending.pop()
        try:
            entries = sorted(directory.iterdir())
        except OSError as exc:
            raise EnumerationError(f"failed to read directory {directory}: {exc}") from exc
        subdirs: list[Path] = []
        for entry in entries:
            if entry.is_dir() and not entry.is_symlink():
                subdirs.append(entry)
            else:
                files.append(entry.relative_to(root).as_posix())
        # reversed so the stack pops subdirectories in sorted order
        pending.extend(reversed(subdirs))
    return files


def copy_file(src: Path, dst: Path) -> None:
    """Copy ``src`` to ``dst``, creating missing parent directories.

    Raises:
        CopyError: With ``phase`` set to the step that failed.
    """
    try:
        source = src.open("rb")
    except OSError as exc:
        raise CopyError("open source file", f"failed to open source file: {exc}") from exc
    with source:
        try:
            dst.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise CopyError(
                "create destination directory",
                f"failed to create destination directory: {exc}",
            ) from exc
        try:
            target = dst.open("wb")
        except OSError as exc:
            raise CopyError(
                "create destination file", f"failed to create destination file: {exc}"
            ) from exc
        try:
            with target:
                shutil.copyfileobj(source, target, _COPY_CHUNK_SIZE)
        except OSError as exc:
            raise CopyError("copy file", f"failed to copy file: {exc}") from exc
