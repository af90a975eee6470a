"""Git and GitHub CLI workflow for publishing a copied file.

The workflow is a fixed, fail-fast sequence: create a branch, stage, commit,
push, open a pull request and show it in the browser. Every command runs with
the target checkout as its working directory; the process-wide working
directory is never changed. Steps that already ran are left in place when a
later step fails.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from pathlib import Path

from . import exec as exec_util
from . import log
from .services.errors import WorkflowStepError

HAPPY_TOKENS = ("😊", "😃", "😄", "🙂", "😁", "😎")
BIRD_TOKENS = ("🐧", "🦉", "🦅", "🦆", "🦢", "🦜", "🦚", "🐤", "🦃", "🐦", "🕊️")


def pick_decorations(rng: random.Random | None = None) -> tuple[str, str]:
    """Return one happy token and one bird token, chosen independently."""
    source = rng or random.Random()
    return source.choice(HAPPY_TOKENS), source.choice(BIRD_TOKENS)


@dataclass(frozen=True)
class WorkflowContext:
    """Inputs for one workflow run."""

    target_dir: Path
    branch: str
    happy: str
    bird: str
    git_path: str = "git"
    gh_path: str = "gh"
    remote: str = "origin"
    browse: bool = True

    @property
    def commit_message(self) -> str:
        return f"Add {self.branch}"

    @property
    def pr_body(self) -> str:
        return f"New finding! {self.happy}{self.bird}"


@dataclass(frozen=True)
class WorkflowStep:
    name: str
    description: str
    argv: tuple[str, ...]


def build_steps(context: WorkflowContext) -> tuple[WorkflowStep, ...]:
    """Return the ordered command steps for ``context``."""
    git = context.git_path
    gh = context.gh_path
    steps = [
        WorkflowStep("create_branch", "create branch", (git, "checkout", "-b", context.branch)),
        WorkflowStep("stage", "stage changes", (git, "add", ".")),
        WorkflowStep("commit", "commit changes", (git, "commit", "-m", context.commit_message)),
        WorkflowStep(
            "push",
            "push changes",
            (git, "push", "--set-upstream", context.remote, context.branch),
        ),
        WorkflowStep(
            "create_pr",
            "create pr",
            (gh, "pr", "create", "--title", context.branch, "--body", context.pr_body),
        ),
    ]
    if context.browse:
        steps.append(WorkflowStep("browse", "open browser", (gh, "browse")))
    return tuple(steps)


def _check_target_dir(target_dir: Path) -> None:
    if not target_dir.is_dir():
        raise WorkflowStepError(
            "change_directory",
            f"failed to change to target directory: {target_dir} is not a directory",
        )


def run_workflow(
    context: WorkflowContext, *, runner: exec_util.CommandRunner | None = None
) -> tuple[str, ...]:
    """Run every workflow step in order, stopping at the first failure.

    Args:
        context: Target checkout, branch name and PR decorations.
        runner: Optional command runner override.

    Returns:
        Names of the steps that ran, in order.

    Raises:
        WorkflowStepError: Identifying the first step that failed.
    """
    _check_target_dir(context.target_dir)
    completed: list[str] = []
    for step in build_steps(context):
        log.debug(f"$ {' '.join(step.argv)}")
        try:
            exec_util.run_command(step.argv, cwd=context.target_dir, runner=runner)
        except exec_util.CommandExecutionError as exc:
            raise WorkflowStepError(
                step.name,
                f"failed to {step.description}: {exc}",
                recovery_hint=_recovery_hint(completed),
            ) from exc
        completed.append(step.name)
    return tuple(completed)


def _recovery_hint(completed: list[str]) -> str | None:
    if not completed:
        return None
    return f"steps already applied and left in place: {', '.join(completed)}"
