"""Orchestrator phases."""

import logging

from suite_runner.models.result import LaunchFailed, ToolOutcome
from suite_runner.tools.base import ExternalTool

log = logging.getLogger(__name__)


def report_outcome(tool: ExternalTool, outcome: ToolOutcome) -> int:
    """Return the outcome's exit code, logging launch failures."""
    if isinstance(outcome, LaunchFailed):
        log.error("Failed to start %s: %s", tool.executable, outcome.reason)
    return outcome.exit_code
