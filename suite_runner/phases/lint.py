"""Lint phase: best-effort linting of shell based test files."""

import logging
from collections.abc import Mapping
from pathlib import Path

from suite_runner.discovery import discover_lint_targets
from suite_runner.phases import report_outcome
from suite_runner.settings import RunnerSettings
from suite_runner.tools.base import Linter

log = logging.getLogger(__name__)


async def run_lint_phase(
    linter: Linter,
    project_root: Path,
    settings: RunnerSettings,
    env: Mapping[str, str] | None = None,
) -> int:
    """Lint the project's test files.

    A missing linter or an empty target set skips the phase. Otherwise the
    linter's exit code is returned unchanged.

    Args:
        linter: Linter to run
        project_root: Canonical project root
        settings: Runner settings (tests directory, extensions, ruleset)
        env: Environment used for lookup and the child process

    Returns:
        0 when linting passed or was skipped, the linter's exit code otherwise

    """
    if not linter.is_available(env):
        log.warning("%s not found; skipping linting phase.", linter.executable)
        return 0

    log.info("Linting shell scripts...")

    targets = discover_lint_targets(
        project_root / settings.tests_dir, settings.lint_extensions
    )
    if not targets:
        log.warning("No shell files found in %s/ for linting.", settings.tests_dir)
        return 0

    config_path = project_root / settings.lint_config
    config_file = config_path if config_path.is_file() else None
    if config_file is not None:
        log.debug("Using lint configuration %s", config_file)

    log.debug("Linting %d file(s)", len(targets))
    outcome = await linter.lint(targets, config_file, env=env)

    exit_code = report_outcome(linter, outcome)
    if exit_code == 0:
        log.info("Linting passed.")
    else:
        log.error("Linting failed with exit code %d.", exit_code)
    return exit_code
