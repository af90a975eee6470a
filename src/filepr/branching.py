"""Helpers for deriving and validating branch names."""

from __future__ import annotations

import datetime as dt
import re
from pathlib import PurePath

from .services.errors import ValidationFailedError

_NON_ALNUM_RE = re.compile(r"[^A-Za-z0-9]")
_BRANCH_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9-]*$")
DATE_FORMAT = "%y-%m-%d"
FALLBACK_STEM = "file"


def sanitize_stem(filename: str) -> str:
    """Return the base filename without extension, non-alphanumerics dashed.

    The result never starts with a dash. A stem with no alphanumerics at all
    becomes ``file``.

    Example:
        >>> sanitize_stem("notes/My File v2.txt")
        'My-File-v2'
    """
    stem = PurePath(filename).stem
    return _NON_ALNUM_RE.sub("-", stem).lstrip("-") or FALLBACK_STEM


def generate_branch_name(filename: str, today: dt.date) -> str:
    """Derive a branch name from a filename and a date.

    Args:
        filename: Selected file, possibly with directory components.
        today: Date appended as ``YY-MM-DD``.

    Returns:
        ``{sanitized-stem}-{YY-MM-DD}``.

    Example:
        >>> generate_branch_name("My File v2.txt", dt.date(2024, 3, 5))
        'My-File-v2-24-03-05'
    """
    return f"{sanitize_stem(filename)}-{today.strftime(DATE_FORMAT)}"


def is_valid_branch_name(value: str) -> bool:
    """Return True for letters, digits and dashes, not starting with a dash."""
    return bool(_BRANCH_RE.match(value))


def resolve_branch_name(
    explicit: str | None, filename: str, today: dt.date | None = None
) -> str:
    """Return the explicit branch name when given, else derive one."""
    if explicit is not None and explicit.strip():
        name = explicit.strip()
        if not is_valid_branch_name(name):
            raise ValidationFailedError(
                f"invalid branch name: {name!r}",
                recovery_hint="use only letters, digits and dashes",
            )
        return name
    return generate_branch_name(filename, today or dt.date.today())
