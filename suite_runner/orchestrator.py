"""Suite orchestrator sequencing the lint and execution phases."""

import logging
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from suite_runner.phases.execution import (
    build_execution_context,
    run_execution_phase,
)
from suite_runner.phases.lint import run_lint_phase
from suite_runner.settings import RunnerSettings
from suite_runner.tools.base import Linter, TestRunner

log = logging.getLogger(__name__)

EXIT_RUNNER_MISSING = 1


@dataclass(frozen=True, kw_only=True)
class SuiteOrchestrator:
    """Runs the lint phase, then the test suite, stopping at the first failure."""

    linter: Linter
    runner: TestRunner
    settings: RunnerSettings

    async def run(
        self,
        project_root: Path,
        args: Sequence[str],
        *,
        interactive: bool,
        env: Mapping[str, str],
    ) -> int:
        """Lint, then run the suite.

        Args:
            project_root: Canonical project root
            args: Positional arguments forwarded to the runner
            interactive: Whether standard output is a terminal
            env: Base environment for tool lookup and child processes

        Returns:
            Exit code of the process

        """
        lint_exit = await run_lint_phase(
            self.linter, project_root, self.settings, env
        )
        if lint_exit != 0:
            return lint_exit

        if not self.runner.is_available(env):
            self.report_missing_runner()
            return EXIT_RUNNER_MISSING

        context = build_execution_context(
            project_root,
            args,
            interactive=interactive,
            env=env,
            default_target=self.settings.tests_dir,
            default_term=self.settings.default_term,
        )
        return await run_execution_phase(self.runner, context)

    def report_missing_runner(self) -> None:
        """Log the missing runner and print installation guidance to stderr."""
        log.error("%s is required to run the test suite.", self.runner.display_name)
        print(f"\n{self.runner.install_guidance}", file=sys.stderr)
