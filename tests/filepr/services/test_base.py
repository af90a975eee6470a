from __future__ import annotations

import pytest

from filepr.services.base import BaseService
from filepr.services.errors import CopyError, ServiceFailure


class _Copying(BaseService[str, str]):
    def _run(self, request: str) -> str:
        if request == "missing.txt":
            raise CopyError("open source file", request)
        return request


class _Reporting(_Copying):
    def _handle_failure(self, error: ServiceFailure) -> str:
        return error.code


def test_service_returns_outcome_of_run() -> None:
    assert _Copying()("notes.md") == "notes.md"


def test_default_failure_hook_reraises_stage_error() -> None:
    with pytest.raises(CopyError):
        _Copying()("missing.txt")


def test_failure_hook_can_replace_the_outcome() -> None:
    assert _Reporting()("missing.txt") == "io_failed"
