"""Pick a file, copy it into a checkout, and open a pull request for it."""

from __future__ import annotations

import datetime as dt
import random
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from pydantic import BaseModel, ConfigDict

from .. import branching, files, log, workflow
from .. import exec as exec_util
from ..models import FileprConfig
from ..selector import FzfSelector, Selector
from .base import BaseService
from .errors import DependencyMissingError, ServiceFailure, ValidationFailedError

Which = Callable[[str], str | None]
Today = Callable[[], dt.date]


class ShipFileRequest(BaseModel):
    """CLI inputs for one run."""

    model_config = ConfigDict(frozen=True)

    search: str | None = None
    target: str = "."
    branch: str | None = None


@dataclass(frozen=True)
class ShipFileOutcome:
    source: Path
    destination: Path
    branch: str
    steps: tuple[str, ...]


class ShipFileService(BaseService[ShipFileRequest, ShipFileOutcome]):
    """Run the whole select, copy and publish pipeline once.

    Collaborators are injected so tests can swap the selector, the command
    runner, tool lookup, the clock and the random source.
    """

    def __init__(
        self,
        config: FileprConfig | None = None,
        *,
        selector: Selector | None = None,
        runner: exec_util.CommandRunner | None = None,
        which: Which = shutil.which,
        today: Today = dt.date.today,
        rng: random.Random | None = None,
    ) -> None:
        self._config = config or FileprConfig()
        self._selector = selector or FzfSelector(
            path=self._config.selector.path, height=self._config.selector.height
        )
        self._runner = runner
        self._which = which
        self._today = today
        self._rng = rng

    def _run(self, request: ShipFileRequest) -> ShipFileOutcome:
        search_root, target_root = self._resolve_roots(request)
        self._check_tools()

        candidates = files.find_files(search_root)
        if not candidates:
            raise ValidationFailedError(f"no files found in search directory '{search_root}'")
        log.debug(f"found {len(candidates)} files under {search_root}")

        selected = self._selector(candidates)
        if not selected:
            raise ValidationFailedError("no file selected")

        branch = branching.resolve_branch_name(request.branch, selected, self._today())
        source = search_root / selected
        destination = target_root / selected

        log.info(f"copying {source} to {destination}...")
        files.copy_file(source, destination)

        happy, bird = workflow.pick_decorations(self._rng)
        context = workflow.WorkflowContext(
            target_dir=target_root,
            branch=branch,
            happy=happy,
            bird=bird,
            git_path=self._config.git.path,
            gh_path=self._config.github.path,
            remote=self._config.git.remote,
            browse=self._config.github.browse,
        )
        log.info("performing git operations...")
        steps = workflow.run_workflow(context, runner=self._runner)
        return ShipFileOutcome(
            source=source, destination=destination, branch=branch, steps=steps
        )

    def _resolve_roots(self, request: ShipFileRequest) -> tuple[Path, Path]:
        search_value = (request.search or "").strip()
        if not search_value:
            raise ValidationFailedError("search directory is required")
        search_root = Path(search_value).expanduser()
        if not search_root.exists():
            raise ValidationFailedError(f"search directory '{search_value}' does not exist")
        if not search_root.is_dir():
            raise ValidationFailedError(f"search directory '{search_value}' is not a directory")
        target_root = Path(request.target or ".").expanduser()
        return search_root.resolve(), target_root.resolve()

    def _check_tools(self) -> None:
        for tool in self._config.required_tools():
            if self._which(tool) is None:
                raise DependencyMissingError(
                    f"required command '{tool}' not found in path",
                    recovery_hint=f"install {tool} or set its path in the filepr config",
                )

    def _handle_failure(self, error: ServiceFailure) -> ShipFileOutcome:
        log.debug(f"pipeline stopped ({error.code})")
        raise error
