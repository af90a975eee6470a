# ruff: noqa: E402

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import filepr.log as filepr_log


@pytest.fixture(autouse=True)
def _isolated_runtime(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> None:
    config_dir = tmp_path_factory.mktemp("filepr-config")
    monkeypatch.setenv("FILEPR_CONFIG", str(config_dir / "config.json"))
    monkeypatch.delenv("FILEPR_LOG_LEVEL", raising=False)
    monkeypatch.setattr(filepr_log, "_configured_level", None)
    monkeypatch.setattr(filepr_log, "_no_color_override", None)
