"""Base class for filepr pipeline services.

A service turns one request model into one outcome by implementing
``_run``. Stages raise ``ServiceFailure`` subclasses (missing tool, copy
failure, cancelled selection, failing git step); ``__call__`` routes them
through ``_handle_failure``, which re-raises by default so ``filepr.cli`` can
print the message and exit with status 1.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .errors import ServiceFailure

R = TypeVar("R")
T = TypeVar("T")


class BaseService(ABC, Generic[R, T]):
    """Callable wrapper around ``_run`` with a single failure hook."""

    def __call__(self, request: R) -> T:
        try:
            return self._run(request)
        except ServiceFailure as e:
            return self._handle_failure(e)

    @abstractmethod
    def _run(self, request: R) -> T:
        """Run the pipeline for ``request`` and return its outcome."""
        ...

    def _handle_failure(self, error: ServiceFailure) -> T:
        """React to a stage failure; the default re-raises it unchanged."""
        raise error
