"""Execution phase: run the test suite in a terminal-appropriate mode."""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from suite_runner.models.result import FlagRejected
from suite_runner.phases import report_outcome
from suite_runner.tools.base import TestRunner

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class ExecutionContext:
    """Process state handed to the test runner.

    Working directory and environment apply to the child process only.
    """

    cwd: Path
    env: Mapping[str, str]
    interactive: bool
    targets: Sequence[str]


def child_environment(env: Mapping[str, str], default_term: str) -> dict[str, str]:
    """Copy env, defaulting TERM when it is unset or empty."""
    child_env = dict(env)
    if not child_env.get("TERM"):
        child_env["TERM"] = default_term
    return child_env


def resolve_targets(args: Sequence[str], default_target: str) -> Sequence[str]:
    """Forward args verbatim, or the default target when there are none."""
    if not args:
        return (default_target,)
    return tuple(args)


def build_execution_context(
    project_root: Path,
    args: Sequence[str],
    *,
    interactive: bool,
    env: Mapping[str, str],
    default_target: str,
    default_term: str,
) -> ExecutionContext:
    """Build the runner's context from the invocation."""
    return ExecutionContext(
        cwd=project_root,
        env=child_environment(env, default_term),
        interactive=interactive,
        targets=resolve_targets(args, default_target),
    )


async def run_execution_phase(runner: TestRunner, context: ExecutionContext) -> int:
    """Run the suite and return the runner's exit code unmodified.

    Interactive runs ask for pretty output and retry once without the flag
    when the runner refuses it. Non-interactive runs use TAP output and are
    never retried.
    """
    log.info("Running %s test suite...", runner.display_name)

    if context.interactive:
        outcome = await runner.run_suite(
            context.targets,
            "pretty",
            cwd=context.cwd,
            env=context.env,
            detect_rejection=True,
        )
        if isinstance(outcome, FlagRejected):
            log.warning(
                "%s does not support %s; retrying without it.",
                runner.executable,
                outcome.flag,
            )
            outcome = await runner.run_suite(
                context.targets, "plain", cwd=context.cwd, env=context.env
            )
    else:
        outcome = await runner.run_suite(
            context.targets, "tap", cwd=context.cwd, env=context.env
        )

    return report_outcome(runner, outcome)
