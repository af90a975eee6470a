from .base import BaseService
from .errors import (
    ConfigError,
    CopyError,
    DependencyMissingError,
    EnumerationError,
    ExternalCommandFailedError,
    IoFailedError,
    SelectionCancelledError,
    SelectorError,
    ServiceFailure,
    ValidationFailedError,
    WorkflowStepError,
)

__all__ = [
    "BaseService",
    "ConfigError",
    "CopyError",
    "DependencyMissingError",
    "EnumerationError",
    "ExternalCommandFailedError",
    "IoFailedError",
    "SelectionCancelledError",
    "SelectorError",
    "ServiceFailure",
    "ValidationFailedError",
    "WorkflowStepError",
]
