"""CLI entry point for the test suite orchestrator."""

import asyncio
import logging
import os
import sys
import sysconfig
from collections.abc import Mapping, Sequence
from pathlib import Path

from pydantic import ValidationError
from pydantic_settings import SettingsError

from suite_runner.logging_config import setup_logging
from suite_runner.orchestrator import SuiteOrchestrator
from suite_runner.paths import ProjectRootError, resolve_directory, resolve_project_root
from suite_runner.settings import RunnerSettings
from suite_runner.tools.base import Linter, TestRunner
from suite_runner.tools.loading import ToolNotFoundError, ToolRoleError, build_tool

EXIT_CONFIGURATION_ERROR = 1


def installed_scripts_dir() -> Path:
    """Return the directory console scripts are installed into."""
    return Path(sysconfig.get_path("scripts")).resolve()


def locate_project_root(settings: RunnerSettings, script_path: Path) -> Path:
    """Return the configured project root, or the script directory's parent.

    Raises:
        ProjectRootError: If the root cannot be resolved, or the script is
            the installed console script and no root is configured

    """
    if settings.project_root is not None:
        return resolve_directory(settings.project_root)

    paths = resolve_project_root(script_path)
    if paths.script_dir == installed_scripts_dir():
        raise ProjectRootError(
            f"{script_path} is an installed console script; set "
            "SUITE_RUNNER_PROJECT_ROOT to the project directory or launch "
            "from a script inside the project's tests/ directory"
        )
    return paths.project_root


async def run(
    args: Sequence[str],
    *,
    script_path: Path,
    interactive: bool,
    settings: RunnerSettings,
    env: Mapping[str, str] | None = None,
) -> int:
    """Lint and run the test suite and return exit code."""
    log = logging.getLogger("suite_runner")
    environ = dict(os.environ if env is None else env)

    try:
        project_root = locate_project_root(settings, script_path)
        linter = build_tool(settings.linter, settings.linter_config, Linter)
        runner = build_tool(
            settings.test_runner, settings.test_runner_config, TestRunner
        )
    except (ProjectRootError, ToolNotFoundError, ToolRoleError, ValidationError) as exc:
        log.error("%s", exc)
        return EXIT_CONFIGURATION_ERROR

    log.debug("Project root: %s", project_root)

    orchestrator = SuiteOrchestrator(linter=linter, runner=runner, settings=settings)
    return await orchestrator.run(
        project_root, args, interactive=interactive, env=environ
    )


def main() -> None:
    """CLI entry point.

    Positional arguments are forwarded to the test runner untouched; the
    orchestrator is configured through ``SUITE_RUNNER_*`` variables only.
    """
    try:
        settings = RunnerSettings()
    except (ValidationError, SettingsError) as exc:
        setup_logging()
        logging.getLogger("suite_runner").error("Invalid configuration: %s", exc)
        sys.exit(EXIT_CONFIGURATION_ERROR)

    setup_logging(settings.log_level)

    exit_code = asyncio.run(
        run(
            sys.argv[1:],
            script_path=Path(sys.argv[0]),
            interactive=sys.stdout.isatty(),
            settings=settings,
        )
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
