from __future__ import annotations

import tempfile
from pathlib import Path

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

import filepr.files as files
from filepr.services import CopyError, EnumerationError

dir_segment = st.text(alphabet="abcxyz", min_size=1, max_size=4).map(lambda s: f"d_{s}")
file_segment = st.text(alphabet="abcxyz.", min_size=1, max_size=6).map(lambda s: f"f_{s}")
tree_strategy = st.lists(
    st.tuples(st.lists(dir_segment, max_size=3), file_segment),
    max_size=12,
)


def _write(root: Path, relative: str, content: bytes = b"x") -> None:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)


@settings(max_examples=50, deadline=None)
@given(tree_strategy)
def test_find_files_returns_exactly_the_files_in_the_tree(
    entries: list[tuple[list[str], str]],
) -> None:
    expected = {"/".join([*dirs, name]) for dirs, name in entries}
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        for relative in expected:
            _write(root, relative)
        (root / "d_empty" / "d_inner").mkdir(parents=True)

        found = files.find_files(root)

    assert len(found) == len(set(found))
    assert set(found) == expected


def test_find_files_lists_relative_paths(tmp_path: Path) -> None:
    _write(tmp_path, "notes/idea.md")
    _write(tmp_path, "notes/drafts/plan.txt")
    _write(tmp_path, "top.txt")

    found = files.find_files(tmp_path)

    assert sorted(found) == ["notes/drafts/plan.txt", "notes/idea.md", "top.txt"]


def test_find_files_is_deterministic(tmp_path: Path) -> None:
    for name in ("b/2.txt", "a/1.txt", "c.txt", "a/z/3.txt"):
        _write(tmp_path, name)

    assert files.find_files(tmp_path) == files.find_files(tmp_path)


def test_find_files_lists_symlinks_without_following(tmp_path: Path) -> None:
    _write(tmp_path, "real/file.txt")
    (tmp_path / "link").symlink_to(tmp_path / "real", target_is_directory=True)

    found = files.find_files(tmp_path)

    assert sorted(found) == ["link", "real/file.txt"]


def test_find_files_fails_for_missing_root(tmp_path: Path) -> None:
    with pytest.raises(EnumerationError):
        files.find_files(tmp_path / "missing")


def test_find_files_fails_when_any_directory_is_unreadable(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _write(tmp_path, "ok/file.txt")
    _write(tmp_path, "locked/secret.txt")
    original_iterdir = Path.iterdir

    def guarded_iterdir(self: Path):
        if self.name == "locked":
            raise PermissionError(13, "Permission denied", str(self))
        return original_iterdir(self)

    monkeypatch.setattr(Path, "iterdir", guarded_iterdir)

    with pytest.raises(EnumerationError) as exc:
        files.find_files(tmp_path)

    assert "locked" in str(exc.value)
    assert exc.value.code == "io_failed"


def test_copy_file_round_trip_creates_missing_directories(tmp_path: Path) -> None:
    payload = bytes(range(256)) * 4096
    src = tmp_path / "search" / "idea.md"
    src.parent.mkdir()
    src.write_bytes(payload)
    dst = tmp_path / "target" / "notes" / "deeper" / "idea.md"

    files.copy_file(src, dst)

    assert dst.read_bytes() == payload


def test_copy_file_truncates_existing_destination(tmp_path: Path) -> None:
    src = tmp_path / "short.txt"
    src.write_bytes(b"new")
    dst = tmp_path / "existing.txt"
    dst.write_bytes(b"much longer old content")

    files.copy_file(src, dst)

    assert dst.read_bytes() == b"new"


def test_copy_file_reports_missing_source(tmp_path: Path) -> None:
    with pytest.raises(CopyError) as exc:
        files.copy_file(tmp_path / "missing.txt", tmp_path / "out.txt")

    assert exc.value.phase == "open source file"
    assert str(exc.value).startswith("failed to open source file")
    assert not (tmp_path / "out.txt").exists()


def test_copy_file_reports_directory_creation_failure(tmp_path: Path) -> None:
    src = tmp_path / "src.txt"
    src.write_text("data", encoding="utf-8")
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    with pytest.raises(CopyError) as exc:
        files.copy_file(src, blocker / "nested" / "out.txt")

    assert exc.value.phase == "create destination directory"


def test_copy_file_reports_destination_creation_failure(tmp_path: Path) -> None:
    src = tmp_path / "src.txt"
    src.write_text("data", encoding="utf-8")
    dst = tmp_path / "taken"
    dst.mkdir()

    with pytest.raises(CopyError) as exc:
        files.copy_file(src, dst)

    assert exc.value.phase == "create destination file"


def test_copy_file_surfaces_streaming_failure(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    src = tmp_path / "src.txt"
    src.write_text("data", encoding="utf-8")

    def broken_copy(*args: object, **kwargs: object) -> None:
        raise OSError(28, "No space left on device")

    monkeypatch.setattr(files.shutil, "copyfileobj", broken_copy)

    with pytest.raises(CopyError) as exc:
        files.copy_file(src, tmp_path / "out.txt")

    assert exc.value.phase == "copy file"
    assert "No space left on device" in str(exc.value)
