"""Failure contracts shared by the filepr pipeline.

Pipeline stages raise ServiceFailure subclasses on expected failures:
bad input, missing tools, filesystem errors, a declined selection, or a
failing external command. Programmer bugs raise normal exceptions. The CLI
catches ServiceFailure, reports the message and exits with status 1.
"""

from __future__ import annotations

from typing import Literal

ServiceFailureCode = Literal[
    "validation_failed",
    "dependency_missing",
    "io_failed",
    "selection_cancelled",
    "external_command_failed",
]


class ServiceFailure(Exception):
    """Expected pipeline failure.

    Use ``raise ServiceFailure(...) from exc`` to chain a causing exception;
    it is available as ``__cause__``.
    """

    def __init__(
        self,
        code: ServiceFailureCode,
        message: str,
        *,
        recovery_hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.recovery_hint = recovery_hint


class ValidationFailedError(ServiceFailure):
    """Validation failed (missing input, invalid branch name, bad config)."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("validation_failed", message, recovery_hint=recovery_hint)


class ConfigError(ValidationFailedError):
    """The configuration file could not be parsed or validated."""


class DependencyMissingError(ServiceFailure):
    """A required external tool is not on the executable search path."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("dependency_missing", message, recovery_hint=recovery_hint)


class IoFailedError(ServiceFailure):
    """Filesystem operation failed."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("io_failed", message, recovery_hint=recovery_hint)


class EnumerationError(IoFailedError):
    """Walking the search root failed."""


class CopyError(IoFailedError):
    """Copying the selected file failed.

    Attributes:
        phase: Which part of the copy failed, e.g. ``open source file``.
    """

    def __init__(self, phase: str, message: str) -> None:
        super().__init__(message)
        self.phase = phase


class SelectionCancelledError(ServiceFailure):
    """The user dismissed the fuzzy finder without picking a file."""

    def __init__(self, message: str = "file selection cancelled") -> None:
        super().__init__("selection_cancelled", message)


class ExternalCommandFailedError(ServiceFailure):
    """External command (fzf, git, gh) failed."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("external_command_failed", message, recovery_hint=recovery_hint)


class SelectorError(ExternalCommandFailedError):
    """The fuzzy finder could not be run or exited abnormally."""


class WorkflowStepError(ExternalCommandFailedError):
    """A git/gh workflow step failed.

    Attributes:
        step: Name of the failing step, e.g. ``create_branch``.
    """

    def __init__(self, step: str, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__(message, recovery_hint=recovery_hint)
        self.step = step
