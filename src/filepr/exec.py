"""Subprocess helpers for running external commands."""

from __future__ import annotations

import signal
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Mapping, Protocol

FailureKind = Literal["missing", "exit", "signal"]


@dataclass(frozen=True)
class CommandRequest:
    """Typed command invocation request.

    ``capture_output`` defaults to false so the child writes straight to the
    controlling terminal.
    """

    argv: tuple[str, ...]
    cwd: Path | None = None
    env: Mapping[str, str] | None = None
    capture_output: bool = False
    text: bool = True


@dataclass(frozen=True)
class CommandResult:
    """Typed command execution result.

    A negative ``returncode`` means the child was killed by signal
    ``-returncode``.
    """

    argv: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def signaled(self) -> bool:
        return self.returncode < 0


class CommandRunner(Protocol):
    """Runtime command-execution interface."""

    def run(self, request: CommandRequest) -> CommandResult | None: ...


class SubprocessCommandRunner:
    """Default command-runner adapter backed by subprocess."""

    def run(self, request: CommandRequest) -> CommandResult | None:
        run_kwargs: dict[str, object] = {
            "cwd": request.cwd,
            "env": request.env,
            "check": False,
        }
        if request.capture_output:
            run_kwargs["capture_output"] = True
            run_kwargs["text"] = request.text
        try:
            completed = subprocess.run(list(request.argv), **run_kwargs)
        except FileNotFoundError:
            return None

        stdout = completed.stdout if isinstance(completed.stdout, str) else ""
        stderr = completed.stderr if isinstance(completed.stderr, str) else ""
        return CommandResult(
            argv=request.argv,
            returncode=completed.returncode,
            stdout=stdout,
            stderr=stderr,
        )


_DEFAULT_COMMAND_RUNNER: CommandRunner = SubprocessCommandRunner()


@dataclass(frozen=True)
class CommandExecutionError(RuntimeError):
    """Raised when an external command cannot run or does not succeed.

    Attributes:
        kind: ``missing`` (binary not found), ``exit`` (non-zero status) or
            ``signal`` (terminated by a signal).
    """

    request: CommandRequest
    kind: FailureKind
    detail: str
    result: CommandResult | None = None

    @property
    def returncode(self) -> int | None:
        return self.result.returncode if self.result is not None else None

    def __str__(self) -> str:
        return self.detail


def run_with_runner(
    request: CommandRequest, *, runner: CommandRunner | None = None
) -> CommandResult | None:
    """Execute a typed command request with the given runner."""
    active_runner = runner or _DEFAULT_COMMAND_RUNNER
    return active_runner.run(request)


def _signal_name(number: int) -> str:
    try:
        return signal.Signals(number).name
    except ValueError:
        return str(number)


def _command_failure_detail(request: CommandRequest, result: CommandResult) -> str:
    command_text = " ".join(request.argv)
    if result.signaled:
        return f"command killed by signal {_signal_name(-result.returncode)}: {command_text}"
    detail = f"command failed: {command_text} (exit {result.returncode})"
    output = (result.stderr or "").strip()
    if output:
        return f"{detail}\n{output}"
    return detail


def run_command(
    cmd: list[str] | tuple[str, ...],
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
    *,
    runner: CommandRunner | None = None,
) -> CommandResult:
    """Run a command attached to the terminal and raise on failure.

    Args:
        cmd: Command and arguments to execute.
        cwd: Optional working directory for the child only.
        env: Optional environment for the child.
        runner: Optional runner override.

    Returns:
        The successful ``CommandResult``.

    Raises:
        CommandExecutionError: When the binary is missing, exits non-zero, or
            is killed by a signal.

    Example:
        >>> run_command(["true"]).returncode
        0
    """
    request = CommandRequest(argv=tuple(cmd), cwd=cwd, env=env)
    result = run_with_runner(request, runner=runner)
    if result is None:
        raise CommandExecutionError(
            request=request,
            kind="missing",
            detail=f"missing required command: {request.argv[0]}",
        )
    if not result.ok:
        raise CommandExecutionError(
            request=request,
            kind="signal" if result.signaled else "exit",
            detail=_command_failure_detail(request, result),
            result=result,
        )
    return result
