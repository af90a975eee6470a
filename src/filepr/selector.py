"""Bridge to the external fuzzy finder (``fzf``).

Candidates are streamed into the finder's stdin from a writer thread while
the main thread blocks reading its stdout, so a candidate list larger than
the pipe buffer cannot deadlock the two processes.
"""

from __future__ import annotations

import subprocess
import sys
import threading
from dataclasses import dataclass
from typing import IO, Callable, Sequence

from . import log
from .services.errors import SelectionCancelledError, SelectorError

FZF_CANCELLED_EXIT = 130
DEFAULT_HEIGHT = "40%"

Selector = Callable[[Sequence[str]], str]


def _feed_candidates(
    stream: IO[str], candidates: tuple[str, ...], failures: list[BaseException]
) -> None:
    try:
        with stream:
            for candidate in candidates:
                stream.write(f"{candidate}\n")
    except BrokenPipeError:
        # the finder exited before reading everything
        log.trace("fuzzy finder closed its input early")
    except Exception as exc:
        failures.append(exc)


def select_candidate(
    candidates: Sequence[str],
    *,
    fzf_path: str = "fzf",
    height: str = DEFAULT_HEIGHT,
) -> str:
    """Let the user pick one candidate with the fuzzy finder.

    Args:
        candidates: Lines offered to the finder, in order.
        fzf_path: Finder executable.
        height: Value for ``--height``.

    Returns:
        The selected line with surrounding whitespace removed, or ``""`` when
        the finder exited successfully without printing anything.

    Raises:
        SelectionCancelledError: The finder exited with status 130.
        SelectorError: The finder is missing, exited with another non-zero
            status, or was killed by a signal.
    """
    argv = [fzf_path, "--height", height]
    items = tuple(candidates)
    try:
        process = subprocess.Popen(
            argv,
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            encoding=sys.getfilesystemencoding(),
            errors=sys.getfilesystemencodeerrors(),
        )
    except OSError as exc:
        raise SelectorError(f"failed to start {fzf_path}: {exc}") from exc

    assert process.stdin is not None
    assert process.stdout is not None
    failures: list[BaseException] = []
    writer = threading.Thread(
        target=_feed_candidates,
        args=(process.stdin, items, failures),
        name="fzf-writer",
        daemon=True,
    )
    writer.start()
    log.trace(f"offered {len(items)} candidates to {fzf_path}")

    with process.stdout:
        selected = process.stdout.readline()
        # drain so the finder never blocks on a full stdout pipe
        process.stdout.read()
    returncode = process.wait()
    writer.join()

    if failures:
        raise SelectorError(
            f"failed to send candidates to {fzf_path}: {failures[0]}"
        ) from failures[0]
    if returncode == FZF_CANCELLED_EXIT:
        raise SelectionCancelledError()
    if returncode < 0:
        raise SelectorError(f"{fzf_path} killed by signal {-returncode}")
    if returncode != 0:
        raise SelectorError(f"{fzf_path} failed with exit status {returncode}")
    return selected.strip()


@dataclass(frozen=True)
class FzfSelector:
    """Configured fuzzy-finder selector used by the pipeline."""

    path: str = "fzf"
    height: str = DEFAULT_HEIGHT

    def __call__(self, candidates: Sequence[str]) -> str:
        return select_candidate(candidates, fzf_path=self.path, height=self.height)
